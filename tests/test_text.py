"""Tests for text normalization and Spanish collation."""

import pytest

from cercania.text import collation_key, normalize


class TestNormalize:
    """Test join-key normalization."""

    def test_strips_accents_and_case(self):
        """Accented upper case and plain lower case produce the same key."""
        assert normalize("PARTIDO ACCIÓN") == normalize("partido accion")

    def test_strips_enye(self):
        """ñ loses its tilde for matching purposes."""
        assert normalize("Ñuñoa") == normalize("nunoa")

    def test_trims_whitespace(self):
        """Surrounding whitespace is ignored."""
        assert normalize("  Partido Verde \n") == "partido verde"

    def test_punctuation_is_kept(self):
        """Only marks, case and surrounding whitespace are removed."""
        assert normalize("É.") != normalize("e")
        assert normalize("É.") == "e."

    def test_empty_string(self):
        """Empty input yields an empty key."""
        assert normalize("") == ""


class TestCollationKey:
    """Test the Spanish collation sort key."""

    def test_accented_letters_sort_with_their_base_letter(self):
        """Á sorts as A, not after Z as in codepoint order."""
        assert sorted(["Azul", "Águila"], key=collation_key) == ["Águila", "Azul"]

    def test_enye_is_a_letter_between_n_and_o(self):
        """ñ sorts after every n and before o."""
        values = ["Ñuble", "Ocaso", "Nuevo", "Nz"]
        assert sorted(values, key=collation_key) == ["Nuevo", "Nz", "Ñuble", "Ocaso"]

    def test_case_insensitive_at_base_strength(self):
        """Base strength treats case and accents as equal."""
        assert collation_key("economía", "base") == collation_key("ECONOMIA", "base")

    def test_tertiary_breaks_ties_on_accent_then_case(self):
        """Unaccented before accented, lower case before upper case."""
        assert collation_key("pena") < collation_key("péna")
        assert collation_key("salud") < collation_key("Salud")

    def test_topics_in_alphabetical_order(self):
        """Topic names sort alphabetically."""
        assert sorted(["Salud", "Economía"], key=collation_key) == ["Economía", "Salud"]

    def test_stable_sort_keeps_ties_in_input_order(self):
        """Values equal at base strength keep their relative order."""
        values = ["Ámbito", "ambito", "AMBITO"]
        result = sorted(values, key=lambda value: collation_key(value, "base"))
        assert result == values

    def test_unknown_strength_raises(self):
        """Only base and tertiary strengths are supported."""
        with pytest.raises(ValueError, match="Unsupported collation strength"):
            collation_key("a", "quaternary")

    def test_punctuation_sorts_before_letters(self):
        """Opening ¿ and « marks place a value before any letter."""
        values = ["Agua", "«Seguridad»", "¿Aborto libre?"]
        assert sorted(values, key=collation_key) == [
            "¿Aborto libre?",
            "«Seguridad»",
            "Agua",
        ]

    def test_symbols_and_digits_order(self):
        """Punctuation, then symbols, then digits, then letters."""
        values = ["Salud", "1 Salud", "+Salud", "@Salud"]
        assert sorted(values, key=collation_key) == [
            "@Salud",
            "+Salud",
            "1 Salud",
            "Salud",
        ]

    def test_ascii_punctuation_before_digits(self):
        """':', '_' and '~' are not placed between digits and letters."""
        for mark in (":", "_", "[", "~"):
            assert collation_key(f"{mark}z") < collation_key("0a") < collation_key("a")

    def test_space_sorts_before_punctuation(self):
        assert collation_key("a b") < collation_key("a-b") < collation_key("ab")
