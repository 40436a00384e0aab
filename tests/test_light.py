from emergence_sim.light import Illuminance, TotalLight


def test_display_rounds_to_hundreds():
    assert str(Illuminance(5e3)) == "5000 lux"
    assert str(Illuminance(6e4)) == "60000 lux"


def test_display_always_multiple_of_hundred():
    for value in [123.0, 4567.8, 99999.0, 5049.9]:
        text = str(Illuminance(value))
        assert text.endswith(" lux")
        assert int(text.split()[0]) % 100 == 0
        assert abs(int(text.split()[0]) - value) <= 50


def test_addition_and_ordering():
    small = Illuminance(5e3)
    large = Illuminance(6e4)
    assert small < large
    assert small + large > large
    assert small + Illuminance() == small


def test_total_light_starts_dark():
    assert TotalLight().illuminance == Illuminance(0.0)


def test_total_light_update_sums_sources():
    total = TotalLight()
    result = total.update([Illuminance(5e3), Illuminance(6e4)])
    assert result == total.illuminance
    assert total.illuminance == Illuminance(5e3) + Illuminance(6e4)
    assert str(total) == str(total.illuminance)


def test_total_light_update_replaces_previous_value():
    total = TotalLight()
    total.update([Illuminance(6e4)])
    total.update([])
    assert total.illuminance == Illuminance()