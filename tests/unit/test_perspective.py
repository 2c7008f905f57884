"""Tests for perspective categorization and mode widening."""

from __future__ import annotations

import pytest

from activity_events.core.perspective import MODE_FILTERS, categorize, classify
from activity_events.models.modes import PerspectiveCategory, SubscriptionMode

M = SubscriptionMode

ME, YOU, THEM = "me", "you", "them"


class TestCategorize:
    @pytest.mark.parametrize(
        ("source", "target", "expected"),
        [
            (ME, ME, PerspectiveCategory.SELF_ON_SELF),
            (YOU, ME, PerspectiveCategory.OTHERS_ON_SELF),
            (ME, YOU, PerspectiveCategory.SELF_ON_OTHERS),
            (YOU, THEM, PerspectiveCategory.OTHERS_ON_OTHERS),
            (YOU, YOU, PerspectiveCategory.OTHERS_ON_OTHERS),
        ],
    )
    def test_categories(self, source, target, expected):
        assert categorize(source, target, ME) is expected

    def test_ids_compared_by_equality(self):
        assert categorize(1001, 1001, 1001.0) is PerspectiveCategory.SELF_ON_SELF


class TestClassify:
    def test_self_on_self(self):
        assert classify(ME, ME, ME) == {
            M.SELF_ON_SELF, M.ANY_ON_SELF, M.SELF_INVOLVED, M.ANY_INVOLVED
        }

    def test_others_on_self(self):
        assert classify(YOU, ME, ME) == {
            M.OTHERS_ON_SELF, M.ANY_ON_SELF, M.SELF_INVOLVED, M.ANY_INVOLVED
        }

    def test_self_on_others(self):
        assert classify(ME, YOU, ME) == {M.SELF_ON_OTHERS, M.SELF_INVOLVED, M.ANY_INVOLVED}

    def test_others_on_others(self):
        assert classify(YOU, THEM, ME) == {M.ANY_INVOLVED}

    def test_any_involved_always_notified(self):
        for modes in MODE_FILTERS.values():
            assert M.ANY_INVOLVED in modes

    def test_table_covers_every_category(self):
        assert set(MODE_FILTERS) == set(PerspectiveCategory)

    def test_result_is_immutable(self):
        assert isinstance(classify(ME, ME, ME), frozenset)
