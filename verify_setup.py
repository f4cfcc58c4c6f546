#!/usr/bin/env python
"""Quick verification that imports work and default tables look right"""
try:
    from main import app
    from bonuscalc.core.config import settings
    from bonuscalc.core.tier_rules import default_rate_table, derive_tier_tables
    from bonuscalc.services.bonus import compare_schemes, recommend

    tables = derive_tier_tables(settings.DEFAULT_MONTHLY_SALARY, default_rate_table(settings.DEFAULT_RATES_PERCENT))
    print("✅ All imports successful")
    print(f"✅ Monthly thresholds: {[int(t) for t in tables.monthly.thresholds]}")
    print(f"✅ Quarterly thresholds: {[int(t) for t in tables.quarterly.thresholds]}")

    rec = recommend(compare_schemes([150000, 150000, 150000], tables))
    print(f"✅ Sample (15萬 x 3): {rec.text}")

    routes = [r.path for r in app.router.routes]
    print(f"✅ Routes count: {len(routes)}")
    print("✅ Application is ready!")
except Exception as e:
    print(f"❌ Error: {e}")
    import traceback
    traceback.print_exc()
