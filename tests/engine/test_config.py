"""
tests/engine/test_config.py

Covers:
  - Builder methods return new configs and leave the receiver untouched
  - Holiday snapshots are isolated from callers
  - Field coercion (datetime narrowing, weekday names, years)
  - weekend_rule argument mapping
  - last_open: the latest date each weekend rule can still pass
"""

import datetime

import pytest

from businessdays import ConfigurationError, InvalidArgumentError
from businessdays.engine import (
    Always,
    BusinessDayConfig,
    BusinessDayEngine,
    ByRange,
    ByYearOrMonth,
    Weekday,
    weekend_rule,
)
from businessdays.holidays import Holiday, HolidaySet, TemporalRange


D = datetime.date


@pytest.fixture
def base():
    return BusinessDayConfig(starting_date=D(2019, 12, 18))


# ── Immutability ──────────────────────────────────────────────────────────────

class TestImmutability:

    def test_builder_returns_new_config(self, base):
        changed = base.with_business_saturday()
        assert changed is not base
        assert base.saturday == Always(False)
        assert changed.saturday == Always(True)

    def test_frozen(self, base):
        with pytest.raises(AttributeError):
            base.starting_date = D(2020, 1, 1)

    def test_equal_configs_compare_equal(self, base):
        assert base.computing_christmas() == base.computing_christmas()

    def test_with_starting_date(self, base):
        moved = base.with_starting_date(D(2020, 1, 1))
        assert moved.starting_date == D(2020, 1, 1)
        assert base.starting_date == D(2019, 12, 18)


# ── Isolation ─────────────────────────────────────────────────────────────────

class TestIsolation:

    def test_source_set_mutation_does_not_leak(self, base):
        source = HolidaySet.from_dates([D(2019, 12, 19)])
        config = base.given_holidays(source)
        source.add(D(2019, 12, 20))
        assert len(config.holidays) == 1

    def test_holiday_set_is_a_fresh_copy(self, base):
        config = base.given_holidays([D(2019, 12, 19)])
        config.holiday_set.add(D(2019, 12, 20))
        assert len(config.holiday_set) == 1

    def test_engine_holiday_set_mutation_does_not_change_results(self, base):
        engine = BusinessDayEngine(base.given_holidays([D(2019, 12, 19)]))
        engine.holiday_set.add(D(2019, 12, 20))
        assert engine.next_business_day() == D(2019, 12, 20)

    def test_given_holidays_merges(self, base):
        config = base.given_holidays([D(2019, 12, 19)]).given_holidays([D(2019, 12, 20)])
        assert [h.date for h in config.holidays] == [D(2019, 12, 19), D(2019, 12, 20)]

    def test_given_none_raises(self, base):
        with pytest.raises(InvalidArgumentError):
            base.given_holidays(None)


# ── Coercion ──────────────────────────────────────────────────────────────────

class TestCoercion:

    def test_datetime_starting_date_narrowed(self):
        config = BusinessDayConfig(starting_date=datetime.datetime(2019, 12, 18, 9, 30))
        assert config.starting_date == D(2019, 12, 18)
        assert type(config.starting_date) is datetime.date

    def test_non_date_starting_date_rejected(self):
        with pytest.raises(InvalidArgumentError):
            BusinessDayConfig(starting_date="2019-12-18")

    def test_holidays_coerced(self):
        config = BusinessDayConfig(starting_date=D(2019, 1, 1), holidays=[D(2019, 4, 25)])
        assert config.holidays == (Holiday.of(2019, 4, 25),)

    def test_weekday_names(self, base):
        config = base.holiday_on_weekdays("monday", Weekday.TUESDAY, 2)
        assert config.holiday_weekdays == {Weekday.MONDAY, Weekday.TUESDAY, Weekday.WEDNESDAY}

    def test_unknown_weekday_name(self, base):
        with pytest.raises(ConfigurationError):
            base.holiday_on_weekdays("someday")

    def test_helpers_use_starting_year(self):
        config = BusinessDayConfig(starting_date=D(2020, 1, 1)).computing_easter()
        assert config.holidays == (Holiday.of(2020, 4, 12),)

    def test_years_validated_at_construction(self):
        with pytest.raises(ConfigurationError):
            BusinessDayConfig(active_years=(20,))

    def test_holiday_weekdays_within_range(self, base):
        december = TemporalRange(D(2019, 12, 1), D(2019, 12, 31))
        config = base.holiday_on_weekdays(Weekday.FRIDAY, within=december)
        assert config.holiday_weekdays == {Weekday.FRIDAY}


# ── weekend_rule ──────────────────────────────────────────────────────────────

class TestWeekendRule:

    def test_bool(self):
        assert weekend_rule(True) == Always(True)
        assert weekend_rule(False) == Always(False)

    def test_sequence(self):
        assert weekend_rule([2019, 12]) == ByYearOrMonth((2019, 12))

    def test_single_int(self):
        assert weekend_rule(12) == ByYearOrMonth((12,))

    def test_range(self):
        r = TemporalRange(D(2019, 4, 20), D(2019, 12, 10))
        assert weekend_rule(r) == ByRange(r)

    def test_rule_passthrough(self):
        rule = ByYearOrMonth((2, 12))
        assert weekend_rule(rule) is rule

    @pytest.mark.parametrize("bad", [None, "2019", b"12"])
    def test_unsupported(self, bad):
        with pytest.raises(ConfigurationError):
            weekend_rule(bad)

    def test_by_range_needs_range(self):
        with pytest.raises(ConfigurationError):
            ByRange((D(2019, 1, 1), D(2019, 2, 1)))


# ── last_open ─────────────────────────────────────────────────────────────────

class TestLastOpen:

    def test_always(self):
        assert Always(True).last_open(Weekday.SATURDAY) == datetime.date.max
        assert Always(False).last_open(Weekday.SATURDAY) == datetime.date.min

    def test_years(self):
        rule = ByYearOrMonth((2018, 2019))
        assert rule.last_open(Weekday.SATURDAY) == D(2019, 12, 28)
        assert rule.last_open(Weekday.SUNDAY) == D(2019, 12, 29)

    def test_year_and_month(self):
        assert ByYearOrMonth((2019, 2)).last_open(Weekday.SATURDAY) == D(2019, 2, 23)

    @pytest.mark.parametrize("values", [(), (12,), (2, 12)])
    def test_recurring(self, values):
        assert ByYearOrMonth(values).last_open(Weekday.SUNDAY) == datetime.date.max

    def test_impossible_month(self):
        assert ByYearOrMonth((13,)).last_open(Weekday.SATURDAY) == datetime.date.min

    def test_range(self):
        rule = ByRange(TemporalRange(D(2019, 12, 1), D(2019, 12, 22)))
        assert rule.last_open(Weekday.SATURDAY) == D(2019, 12, 21)
        assert rule.last_open(Weekday.SUNDAY) == D(2019, 12, 15)

    def test_range_without_that_weekday(self):
        rule = ByRange(TemporalRange(D(2019, 12, 18), D(2019, 12, 21)))
        assert rule.last_open(Weekday.SATURDAY) == datetime.date.min
