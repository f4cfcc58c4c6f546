from decimal import Decimal

import pytest

from bonuscalc.core.tier_rules import (
    TierConfig,
    default_rate_table,
    rate_table_from_percent,
    derive_tier_tables,
    monthly_thresholds,
    quarterly_thresholds,
    with_rate,
)


class TestTierConfig:
    def test_valid_config(self):
        cfg = TierConfig((120000, 200000, 400000), (0.03, 0.05, 0.10, 0.15))
        assert cfg.thresholds == (Decimal("120000"), Decimal("200000"), Decimal("400000"))
        assert cfg.top_rate == Decimal("0.15")

    def test_rates_must_be_one_longer(self):
        with pytest.raises(ValueError):
            TierConfig((120000, 200000, 400000), (0.03, 0.05, 0.10))

    def test_negative_rate_rejected(self):
        with pytest.raises(ValueError):
            TierConfig((120000, 200000), (0.03, -0.05, 0.10))

    def test_non_positive_threshold_rejected(self):
        with pytest.raises(ValueError):
            TierConfig((0, 200000), (0.03, 0.05, 0.10))

    def test_thresholds_strictly_increasing(self):
        with pytest.raises(ValueError):
            TierConfig((200000, 200000), (0.03, 0.05, 0.10))
        with pytest.raises(ValueError):
            TierConfig((400000, 200000), (0.03, 0.05, 0.10))

    def test_from_reduced_reuses_last_rate(self):
        cfg = TierConfig.from_reduced([120000, 200000, 400000], [0.03, 0.05, 0.10])
        assert cfg.rates == (Decimal("0.03"), Decimal("0.05"), Decimal("0.10"), Decimal("0.10"))

    def test_from_reduced_needs_matching_lengths(self):
        with pytest.raises(ValueError):
            TierConfig.from_reduced([120000, 200000], [0.03])


class TestDerivation:
    def test_default_salary_reproduces_fixed_tables(self):
        assert monthly_thresholds(40000) == (Decimal("120000"), Decimal("200000"), Decimal("400000"))
        assert quarterly_thresholds(40000) == (Decimal("360000"), Decimal("600000"), Decimal("1200000"))

    def test_salary_change_recomputes_thresholds_only(self):
        rates = default_rate_table([3, 5, 10, 10])
        before = derive_tier_tables(40000, rates)
        after = derive_tier_tables(50000, rates)

        assert after.monthly.thresholds == (Decimal("150000"), Decimal("250000"), Decimal("500000"))
        assert after.quarterly.thresholds == (Decimal("450000"), Decimal("750000"), Decimal("1500000"))
        assert after.monthly.rates == before.monthly.rates
        assert after.quarterly.rates == before.quarterly.rates

    def test_with_rate_changes_single_rate(self):
        rates = default_rate_table([3, 5, 10, 10])
        updated = with_rate(rates, "monthly", 3, Decimal("0.15"))

        assert updated["monthly"] == [Decimal("0.03"), Decimal("0.05"), Decimal("0.1"), Decimal("0.15")]
        assert updated["quarterly"] == rates["quarterly"]
        # исходная таблица не мутирует
        assert rates["monthly"][3] == Decimal("0.1")

    def test_with_rate_leaves_thresholds_untouched(self):
        rates = with_rate(default_rate_table([3, 5, 10, 10]), "quarterly", 0, "0.04")
        tables = derive_tier_tables(40000, rates)
        assert tables.quarterly.thresholds == quarterly_thresholds(40000)
        assert tables.quarterly.rates[0] == Decimal("0.04")

    @pytest.mark.parametrize("scheme,index,rate", [
        ("yearly", 0, 0.05),
        ("monthly", 4, 0.05),
        ("monthly", -1, 0.05),
        ("monthly", 0, -0.01),
    ])
    def test_with_rate_rejects_bad_input(self, scheme, index, rate):
        with pytest.raises(ValueError):
            with_rate(default_rate_table([3, 5, 10, 10]), scheme, index, rate)

    def test_default_rate_table_size(self):
        with pytest.raises(ValueError):
            default_rate_table([3, 5, 10])

    def test_rate_table_from_percent(self):
        table = rate_table_from_percent([3, 5, 10, 15], [2.5, 5, 10, 10])

        assert table == {
            "monthly": [Decimal("0.03"), Decimal("0.05"), Decimal("0.1"), Decimal("0.15")],
            "quarterly": [Decimal("0.025"), Decimal("0.05"), Decimal("0.1"), Decimal("0.1")],
        }
        with pytest.raises(ValueError):
            rate_table_from_percent([3, 5, 10, 10], [3, 5])

    def test_default_rate_table_schemes_are_independent(self):
        table = default_rate_table([3, 5, 10, 10])
        assert table["monthly"] == table["quarterly"]
        assert table["monthly"] is not table["quarterly"]
