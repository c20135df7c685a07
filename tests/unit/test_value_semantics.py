"""
Unit Tests for value vs reference semantics
"""

from market_demo.domain.models import SEBI, StockLocation, StockTransaction


class TestStockTransaction:

    def test_update_shares_mutates_in_place(self):
        transaction = StockTransaction(stock_name="Infosys", shares_bought=10)
        transaction.update_shares(5)
        assert transaction.shares_bought == 15
        assert transaction.summary() == "Updated shares for Infosys: 15 shares"

    def test_copies_are_independent(self):
        original = StockTransaction(stock_name="Infosys", shares_bought=10)
        copy = original.copy()
        copy.update_shares(5)
        assert original.shares_bought == 10
        assert copy.shares_bought == 15


class TestStockLocation:

    def test_copy_mutation_leaves_original(self):
        location_a = StockLocation(latitude=18.929, longitude=72.8355)
        location_b = location_a.copy()
        location_b.latitude = 19.075

        assert location_a.describe("BSE Location A") == "BSE Location A: 18.929, 72.8355"
        assert location_b.describe("BSE Location B") == "BSE Location B: 19.075, 72.8355"
        assert location_a is not location_b


class TestSEBI:

    def test_assignment_aliases(self):
        sebi_a = SEBI()
        sebi_b = sebi_a
        sebi_b.rule = "Deregulate"

        assert sebi_a.describe("SEBI A") == "SEBI A Rule: Deregulate"
        assert sebi_b.describe("SEBI B") == "SEBI B Rule: Deregulate"

    def test_default_rule(self):
        assert SEBI().rule == "Regulate"


def test_location_integer_coordinates_render_as_floats():
    assert StockLocation(latitude=18, longitude=72).describe("BSE") == "BSE: 18.0, 72.0"
