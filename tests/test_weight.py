import pytest

from pocketapps import weight
from pocketapps.weight import planet_weights


def test_body_order():
    assert list(planet_weights(1)) == [
        "Mercury", "Venus", "Earth", "Mars", "Jupiter", "Saturn",
        "Uranus", "Neptune", "Pluto", "the Moon", "the Sun",
    ]


def test_earth_weight_unchanged():
    assert planet_weights(72.5)["Earth"] == pytest.approx(72.5)


def test_zero_weight_everywhere():
    assert set(planet_weights(0).values()) == {0}


def test_scaling_is_linear():
    one = planet_weights(10)
    two = planet_weights(20)
    for body in one:
        assert two[body] == pytest.approx(2 * one[body])


def test_mercury_and_mars_equal():
    result = planet_weights(55)
    assert result["Mercury"] == pytest.approx(result["Mars"])


def test_sun_heaviest_and_pluto_lightest():
    result = planet_weights(60)
    assert max(result, key=result.get) == "the Sun"
    assert min(result, key=result.get) == "Pluto"


def test_jupiter_value():
    assert planet_weights(100)["Jupiter"] == pytest.approx(235.0)


def test_main_prints_weights(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "70")
    assert weight.main([]) == 0
    out = capsys.readouterr().out
    assert "Your weight on Earth is: 70.00" in out
    assert out.count("Your weight on") == 11


def test_main_invalid_weight(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "heavy")
    assert weight.main([]) == 1
    assert "Invalid weight" in capsys.readouterr().err