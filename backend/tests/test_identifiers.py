"""
GenexMart Backend: Record Code Generation Tests
"""

from unittest.mock import patch

from genexmart.services.identifiers import (
    CATEGORY_ID_LENGTH,
    CUSTOMER_ID_LENGTH,
    ID_ALPHABET,
    generate_id,
)


class TestGenerateId:

    def test_alphabet_is_uppercase_letters_and_digits(self):
        assert ID_ALPHABET == "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

    def test_requested_length(self):
        assert len(generate_id(CATEGORY_ID_LENGTH)) == 2
        assert len(generate_id(CUSTOMER_ID_LENGTH)) == 8
        assert generate_id(0) == ""

    def test_only_alphabet_characters(self):
        for _ in range(200):
            assert set(generate_id(8)) <= set(ID_ALPHABET)

    def test_one_draw_per_position(self):
        """Each character is sampled on its own from the full alphabet."""
        with patch("genexmart.services.identifiers.random.choice", side_effect=list("Q7X")) as choice:
            assert generate_id(3) == "Q7X"
        assert choice.call_count == 3
        for call in choice.call_args_list:
            assert call.args == (ID_ALPHABET,)

    def test_codes_vary(self):
        codes = {generate_id(8) for _ in range(50)}
        assert len(codes) > 1
