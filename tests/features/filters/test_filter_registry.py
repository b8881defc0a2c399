"""Tests for the role-gated filter registry."""

import threading
from dataclasses import dataclass
from typing import Callable, List

import pytest

from neo_access.core.exceptions import InvalidIdentityError
from neo_access.features.filters.entities.filter_entry import FilterEntry
from neo_access.features.filters.entities.protocols import FilterableQuery
from neo_access.features.filters.services.filter_registry import FilterRegistry
from neo_access.features.permissions.entities.permission import Identity


@dataclass
class Invoice:
    number: int
    region: str
    amount: int


class Order:
    pass


class RecordingQuery:
    """Lazy query double recording every predicate applied to it."""
    
    def __init__(self, predicates: List[Callable] = None):
        self.predicates = list(predicates or [])
    
    def filter(self, predicate):
        return RecordingQuery(self.predicates + [predicate])


def is_emea(invoice):
    return invoice.region == "emea"


def is_small(invoice):
    return invoice.amount < 100


@pytest.fixture
def invoices():
    return [
        Invoice(1, "emea", 50),
        Invoice(2, "emea", 500),
        Invoice(3, "apac", 20),
        Invoice(4, "apac", 900),
    ]


class TestFilterEntry:
    
    def test_applies_to_matching_role(self):
        entry = FilterEntry(is_emea, role="r")
        assert entry.applies_to("r") is True
        assert entry.applies_to("x") is False
    
    def test_inverse_applies_to_everyone_else(self):
        entry = FilterEntry(is_emea, role="r", inverse=True)
        assert entry.applies_to("r") is False
        assert entry.applies_to("x") is True
    
    def test_equal_entries_are_distinct(self):
        assert FilterEntry(is_emea, "r") != FilterEntry(is_emea, "r")


class TestApplyFilters:
    """Test filter selection and application."""
    
    def test_no_filters_returns_input_unchanged(self, filter_registry, invoices):
        result = filter_registry.apply_filters(Invoice, Identity("r"), invoices)
        
        assert result is invoices
    
    def test_filters_are_scoped_per_type(self, filter_registry, invoices):
        filter_registry.register_filter(Order, lambda order: False, role="r")
        
        assert filter_registry.apply_filters(Invoice, Identity("r"), invoices) is invoices
    
    def test_inverse_selects_filters(self, filter_registry, invoices):
        filter_registry.register_filter(Invoice, is_emea, role="r", inverse=False)
        filter_registry.register_filter(Invoice, is_small, role="r", inverse=True)
        
        as_r = filter_registry.apply_filters(Invoice, Identity("r"), invoices)
        as_x = filter_registry.apply_filters(Invoice, Identity("x"), invoices)
        
        assert [invoice.number for invoice in as_r] == [1, 2]
        assert [invoice.number for invoice in as_x] == [1, 3]
    
    def test_applicable_filters_are_combined_with_and(self, filter_registry, invoices):
        filter_registry.register_filter(Invoice, is_emea, role="r")
        filter_registry.register_filter(Invoice, is_small, role="r")
        
        result = filter_registry.apply_filters(Invoice, Identity("r"), invoices)
        
        assert [invoice.number for invoice in result] == [1]
    
    def test_no_applicable_filter_copies_collection(self, filter_registry, invoices):
        filter_registry.register_filter(Invoice, is_emea, role="r")
        
        result = filter_registry.apply_filters(Invoice, Identity("x"), invoices)
        
        assert result == invoices
        assert result is not invoices
    
    def test_collection_shapes(self, filter_registry, invoices):
        filter_registry.register_filter(Invoice, is_emea, role="r")
        
        from_tuple = filter_registry.apply_filters(Invoice, Identity("r"), tuple(invoices))
        from_generator = filter_registry.apply_filters(Invoice, Identity("r"), (i for i in invoices))
        
        assert [invoice.number for invoice in from_tuple] == [1, 2]
        assert [invoice.number for invoice in from_generator] == [1, 2]
    
    def test_query_is_narrowed_in_registration_order(self, filter_registry):
        filter_registry.register_filter(Invoice, is_emea, role="r")
        filter_registry.register_filter(Invoice, is_small, role="x")
        filter_registry.register_filter(Invoice, is_small, role="r")
        query = RecordingQuery()
        
        result = filter_registry.apply_filters(Invoice, Identity("r"), query)
        
        assert isinstance(query, FilterableQuery)
        assert result.predicates == [is_emea, is_small]
        assert query.predicates == []
    
    def test_query_without_filters_is_returned_as_is(self, filter_registry):
        query = RecordingQuery()
        
        assert filter_registry.apply_filters(Invoice, Identity("r"), query) is query
    
    def test_identity_name_is_required(self, filter_registry, invoices):
        filter_registry.register_filter(Invoice, is_emea, role="r")
        
        with pytest.raises(InvalidIdentityError):
            filter_registry.apply_filters(Invoice, object(), invoices)
    
    def test_applicable_filters(self, filter_registry):
        filter_registry.register_filter(Invoice, is_emea, role="r")
        filter_registry.register_filter(Invoice, is_small, role="r", inverse=True)
        
        entries = filter_registry.applicable_filters(Invoice, Identity("x"))
        
        assert [entry.predicate for entry in entries] == [is_small]
    
    @pytest.mark.parametrize("name", ["r", "x"])
    def test_query_uses_exactly_the_applicable_filters(self, filter_registry, name):
        filter_registry.register_filter(Invoice, is_emea, role="r")
        filter_registry.register_filter(Invoice, is_small, role="r", inverse=True)
        identity = Identity(name)
        
        result = filter_registry.apply_filters(Invoice, identity, RecordingQuery())
        
        expected = [entry.predicate for entry in filter_registry.applicable_filters(Invoice, identity)]
        assert result.predicates == expected


class TestRegistrationDisposal:
    """Test disposal handles."""
    
    def test_dispose_removes_only_its_entry(self, filter_registry, invoices):
        emea = filter_registry.register_filter(Invoice, is_emea, role="r")
        filter_registry.register_filter(Invoice, is_small, role="r")
        
        emea.dispose()
        result = filter_registry.apply_filters(Invoice, Identity("r"), invoices)
        
        assert [invoice.number for invoice in result] == [1, 3]
        assert emea.disposed is True
    
    def test_dispose_is_idempotent(self, filter_registry):
        first = filter_registry.register_filter(Invoice, is_emea, role="r")
        twin = filter_registry.register_filter(Invoice, is_emea, role="r")
        
        first.dispose()
        first.dispose()
        first.close()
        
        assert filter_registry.registered_filters(Invoice) == (twin.entry,)
    
    def test_last_disposal_restores_fast_path(self, filter_registry, invoices):
        registration = filter_registry.register_filter(Invoice, is_emea, role="r")
        
        registration.dispose()
        
        assert filter_registry.apply_filters(Invoice, Identity("r"), invoices) is invoices
    
    def test_registration_as_context_manager(self, filter_registry, invoices):
        with filter_registry.register_filter(Invoice, is_emea, role="r"):
            inside = filter_registry.apply_filters(Invoice, Identity("r"), invoices)
        outside = filter_registry.apply_filters(Invoice, Identity("r"), invoices)
        
        assert len(inside) == 2
        assert outside is invoices
    
    def test_clear(self, filter_registry):
        registration = filter_registry.register_filter(Invoice, is_emea, role="r")
        filter_registry.register_filter(Order, lambda order: True, role="r")
        
        filter_registry.clear(Invoice)
        assert filter_registry.registered_filters(Invoice) == ()
        assert len(filter_registry.registered_filters(Order)) == 1
        
        filter_registry.clear()
        assert filter_registry.registered_filters(Order) == ()
        registration.dispose()
    
    def test_iteration_sees_consistent_list_during_registration(self, filter_registry):
        seen = filter_registry.registered_filters(Invoice)
        filter_registry.register_filter(Invoice, is_emea, role="r")
        
        assert seen == ()
    
    def test_concurrent_registration_and_disposal(self, filter_registry):
        def worker():
            for _ in range(200):
                registration = filter_registry.register_filter(Invoice, is_emea, role="r")
                registration.dispose()
        
        keeper = filter_registry.register_filter(Invoice, is_small, role="r")
        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        
        assert filter_registry.registered_filters(Invoice) == (keeper.entry,)
