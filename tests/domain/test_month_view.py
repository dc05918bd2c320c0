"""Tests for diario.domain.month_view derivations and controller."""

from datetime import date

from diario.domain.entries import EntryStore
from diario.domain.models import DayKey, Entry, Field, Month
from diario.domain.month_view import (
    EditingCursor,
    MonthlyTotals,
    MonthViewController,
    daily_balance,
    enumerate_days,
    monthly_totals,
)


def fixed_clock(day: date):
    return lambda: day


class TestEnumerateDays:
    """Tests for enumerate_days."""

    def test_leap_february_has_29_days(self) -> None:
        """Should yield 29 days for February 2024."""
        days = enumerate_days(Month("2024-02"))

        assert len(days) == 29
        assert days[-1] == "2024-02-29"

    def test_non_leap_february_has_28_days(self) -> None:
        """Should yield 28 days for February 2023."""
        assert len(enumerate_days(Month("2023-02"))) == 28

    def test_days_are_ascending_keys(self) -> None:
        """Should yield YYYY-MM-DD keys from day 1 upwards."""
        days = enumerate_days(Month("2024-03"))

        assert days[:3] == ["2024-03-01", "2024-03-02", "2024-03-03"]
        assert days == sorted(days)
        assert len(days) == 31


class TestAggregates:
    """Tests for daily_balance and monthly_totals."""

    def test_scenario_single_day(self) -> None:
        """Should compute the documented March 2024 scenario."""
        key = DayKey("2024-03-05")
        store = EntryStore().set_field(key, Field.INCOME, "150").set_field(key, Field.EXPENSE, "40")

        assert store.get(key) == Entry(150.0, 40.0)
        assert daily_balance(store, key) == 110.0
        assert monthly_totals(store, Month("2024-03")) == MonthlyTotals(income=150.0, expense=40.0, balance=110.0)

    def test_empty_month_is_all_zero(self) -> None:
        """Should total zero for a month without entries."""
        assert monthly_totals(EntryStore(), Month("2024-03")) == MonthlyTotals(0.0, 0.0, 0.0)

    def test_only_days_of_the_month_count(self) -> None:
        """Should ignore entries from neighbouring months."""
        store = (
            EntryStore()
            .set_field(DayKey("2024-02-29"), Field.INCOME, "1000")
            .set_field(DayKey("2024-03-01"), Field.INCOME, "10")
            .set_field(DayKey("2024-03-31"), Field.EXPENSE, "25")
            .set_field(DayKey("2024-04-01"), Field.EXPENSE, "1000")
        )

        totals = monthly_totals(store, Month("2024-03"))

        assert totals == MonthlyTotals(income=10.0, expense=25.0, balance=-15.0)

    def test_balance_is_income_minus_expense(self) -> None:
        """Should keep balance == income - expense."""
        store = EntryStore()
        for day, income, expense in [(1, "12.5", "3"), (2, "0", "7.25"), (15, "100", "99")]:
            key = DayKey(f"2024-05-{day:02d}")
            store = store.set_field(key, Field.INCOME, income).set_field(key, Field.EXPENSE, expense)

        totals = monthly_totals(store, Month("2024-05"))

        assert totals.income == 112.5
        assert totals.expense == 109.25
        assert totals.balance == totals.income - totals.expense


class TestNavigation:
    """Tests for MonthViewController navigation."""

    def test_defaults_to_current_month(self) -> None:
        """Should start on the clock's month."""
        controller = MonthViewController(today=fixed_clock(date(2024, 7, 14)))

        assert controller.month == "2024-07"

    def test_next_from_december(self) -> None:
        """Should go to January of the next year."""
        controller = MonthViewController(month=Month("2024-12"))

        assert controller.go_to_next_month() == "2025-01"

    def test_previous_from_january(self) -> None:
        """Should go to December of the previous year."""
        controller = MonthViewController(month=Month("2024-01"))

        assert controller.go_to_previous_month() == "2023-12"

    def test_go_to_today(self) -> None:
        """Should reset to the clock's month."""
        controller = MonthViewController(today=fixed_clock(date(2024, 7, 14)), month=Month("2020-01"))
        controller.go_to_next_month()

        assert controller.go_to_today() == "2024-07"

    def test_days_follow_displayed_month(self) -> None:
        """Should recompute days on month change."""
        controller = MonthViewController(month=Month("2024-01"))
        controller.go_to_next_month()

        assert len(controller.enumerate_days()) == 29

    def test_is_today(self) -> None:
        """Should flag the clock's day."""
        controller = MonthViewController(today=fixed_clock(date(2024, 7, 14)))

        assert controller.is_today(DayKey("2024-07-14"))
        assert not controller.is_today(DayKey("2024-07-15"))


class TestEditing:
    """Tests for the editing cursor and mutations."""

    def test_begin_edit_sets_cursor(self) -> None:
        """Should point at one cell."""
        controller = MonthViewController(month=Month("2024-03"))
        controller.begin_edit(DayKey("2024-03-05"), Field.INCOME)

        assert controller.cursor == EditingCursor(DayKey("2024-03-05"), Field.INCOME)

    def test_new_cursor_replaces_old(self) -> None:
        """Should keep only one active cursor."""
        controller = MonthViewController(month=Month("2024-03"))
        controller.begin_edit(DayKey("2024-03-05"), Field.INCOME)
        controller.begin_edit(DayKey("2024-03-06"), Field.EXPENSE)

        assert controller.cursor == EditingCursor(DayKey("2024-03-06"), Field.EXPENSE)

    def test_commit_applies_and_clears(self) -> None:
        """Should write at the cursor then leave edit mode."""
        controller = MonthViewController(month=Month("2024-03"))
        controller.begin_edit(DayKey("2024-03-05"), Field.EXPENSE)

        entry = controller.commit_edit("40")

        assert entry == Entry(0.0, 40.0)
        assert controller.get(DayKey("2024-03-05")) == Entry(0.0, 40.0)
        assert controller.cursor is None

    def test_commit_without_cursor_is_noop(self) -> None:
        """Should change nothing when no cell is being edited."""
        controller = MonthViewController(month=Month("2024-03"))

        assert controller.commit_edit("40") is None
        assert len(controller.store) == 0

    def test_blur_clears_without_writing(self) -> None:
        """Should leave edit mode and keep the store as is."""
        controller = MonthViewController(month=Month("2024-03"))
        controller.begin_edit(DayKey("2024-03-05"), Field.INCOME)
        controller.blur()

        assert controller.cursor is None
        assert len(controller.store) == 0

    def test_commit_malformed_input(self) -> None:
        """Should store 0 for non-numeric input."""
        controller = MonthViewController(month=Month("2024-03"))
        controller.begin_edit(DayKey("2024-03-06"), Field.INCOME)
        controller.commit_edit("abc")

        assert controller.get(DayKey("2024-03-06")).income == 0.0

    def test_listeners_get_each_new_store(self) -> None:
        """Should notify listeners once per mutation, in order."""
        seen: list[EntryStore] = []
        controller = MonthViewController(month=Month("2024-03"))
        controller.subscribe(seen.append)

        controller.set_entry_field(DayKey("2024-03-05"), Field.INCOME, "150")
        controller.begin_edit(DayKey("2024-03-05"), Field.EXPENSE)
        controller.commit_edit("40")

        assert len(seen) == 2
        assert seen[0].get(DayKey("2024-03-05")) == Entry(150.0, 0.0)
        assert seen[1] == controller.store

    def test_navigation_does_not_notify(self) -> None:
        """Should only notify on mutations."""
        seen: list[EntryStore] = []
        controller = MonthViewController(month=Month("2024-03"))
        controller.subscribe(seen.append)

        controller.go_to_next_month()
        controller.begin_edit(DayKey("2024-04-01"), Field.INCOME)
        controller.blur()

        assert seen == []

    def test_rows_and_totals_for_displayed_month(self) -> None:
        """Should expose one row per day with its balance."""
        store = EntryStore({DayKey("2024-02-10"): Entry(50.0, 20.0)})
        controller = MonthViewController(store, month=Month("2024-02"))

        rows = controller.rows()

        assert len(rows) == 29
        assert rows[9].day == date(2024, 2, 10)
        assert rows[9].balance == 30.0
        assert controller.daily_balance(DayKey("2024-02-10")) == 30.0
        assert controller.monthly_totals() == MonthlyTotals(50.0, 20.0, 30.0)
