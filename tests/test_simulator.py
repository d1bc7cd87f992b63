import unittest

import numpy as np

from burndown_projector.ingest.scope_changes import ScopeChange
from burndown_projector.sim.burn_models import make_burn_model
from burndown_projector.sim.params import InvalidParamsError, SimulationParams, validate_params
from burndown_projector.sim.simulator import baseline_ideal, round2, simulate


def _params(**kw):
    base = dict(start_date=None, duration_days=10, total_work=100, model="linear",
                variability=20, scope_changes_text="")
    base.update(kw)
    return SimulationParams(**base)


class TestRounding(unittest.TestCase):
    def test_half_away_from_zero(self):
        self.assertEqual(round2(0.125), 0.13)
        self.assertEqual(round2(-0.125), -0.13)

    def test_binary_value_respected(self):
        # 1.005 is stored as 1.00499999...
        self.assertEqual(round2(1.005), 1.0)
        self.assertEqual(round2(85.5555555), 85.56)


class TestParams(unittest.TestCase):
    def test_duration_clamped(self):
        self.assertEqual(_params(duration_days=500).days, 120)
        self.assertEqual(_params(duration_days=1).days, 2)

    def test_total_floor(self):
        self.assertEqual(_params(total_work=0.25).total, 1.0)

    def test_variability_clamped(self):
        self.assertAlmostEqual(_params(variability=100).variability_fraction, 0.6)
        self.assertEqual(_params(variability=-5).variability_fraction, 0.0)

    def test_validation_messages(self):
        with self.assertRaisesRegex(InvalidParamsError, "Duration must be at least 2 days."):
            validate_params(_params(duration_days=1))
        with self.assertRaises(InvalidParamsError):
            validate_params(_params(duration_days=float("nan")))
        with self.assertRaisesRegex(InvalidParamsError, "Total work must be greater than 0."):
            validate_params(_params(total_work=0))
        with self.assertRaises(InvalidParamsError):
            validate_params(_params(total_work=float("inf")))

    def test_unknown_model(self):
        with self.assertRaises(ValueError):
            validate_params(_params(model="magic"))
        with self.assertRaises(ValueError):
            make_burn_model(_params(model="magic"))


class TestSimulator(unittest.TestCase):
    def test_series_lengths_match_clamped_duration(self):
        for d, expected in [(2, 2), (10, 10), (500, 120)]:
            s = simulate(_params(duration_days=d, model="realistic", seed=1))
            self.assertEqual(len(s.labels), expected)
            self.assertEqual(len(s.ideal), expected)
            self.assertEqual(len(s.actual), expected)
            self.assertEqual(len(s.scope_delta_by_day), expected)

    def test_linear_without_scope_tracks_ideal(self):
        s = simulate(_params())
        for a, i in zip(s.actual, s.ideal):
            self.assertAlmostEqual(a, i, delta=0.011)
        self.assertEqual(s.ideal[0], 100.0)
        self.assertEqual(s.ideal[-1], 0.0)
        self.assertEqual(s.actual[-1], 0.0)

    def test_first_day_has_no_burn(self):
        self.assertEqual(simulate(_params(model="realistic", seed=5)).actual[0], 100.0)
        s = simulate(_params(scope_changes_text="1:+20"))
        self.assertEqual(s.actual[0], 120.0)
        self.assertEqual(s.ideal[0], 120.0)

    def test_scope_change_on_day_three(self):
        s = simulate(_params(scope_changes_text="3:+10"))
        self.assertEqual(s.scope_delta_by_day[2], 10)
        self.assertEqual(sum(s.scope_delta_by_day), 10)
        # 110 * (1 - 2/9)
        self.assertAlmostEqual(s.ideal[2], 85.56)
        self.assertAlmostEqual(s.ideal[1], 88.89)
        # 100 - 100/9 + 10 - 100/9
        self.assertAlmostEqual(s.actual[2], 87.78)

    def test_same_day_changes_accumulate(self):
        s = simulate(_params(scope_changes_text="4:+10, 4:-3, 4:+1"))
        self.assertEqual(s.scope_delta_by_day[3], 8)

    def test_out_of_range_changes_ignored(self):
        plain = simulate(_params())
        s = simulate(_params(), changes=[ScopeChange(11, 50), ScopeChange(0, 5), ScopeChange(2.5, 7)])
        self.assertEqual(s.ideal, plain.ideal)
        self.assertEqual(s.actual, plain.actual)
        self.assertEqual(s.scope_delta_by_day, [0.0] * 10)

    def test_ideal_not_floored_actual_is(self):
        s = simulate(_params(duration_days=5, total_work=10, scope_changes_text="2:-30"))
        # total so far = -20 on day index 1
        self.assertEqual(s.ideal[1], -15.0)
        self.assertTrue(all(v >= 0 for v in s.actual))
        self.assertEqual(s.actual[1:], [0.0] * 4)

    def test_baseline_ignores_scope(self):
        s = simulate(_params(scope_changes_text="3:+10"))
        self.assertEqual(s.baseline, baseline_ideal(100, 10))
        self.assertEqual(s.baseline[0], 100.0)
        self.assertAlmostEqual(s.baseline[2], 77.78)

    def test_realistic_seed_reproducible(self):
        a = simulate(_params(model="realistic", seed=7))
        b = simulate(_params(model="realistic", seed=7))
        self.assertEqual(a.actual, b.actual)

    def test_injected_rng_matches_seed(self):
        a = simulate(_params(model="realistic", seed=3))
        b = simulate(_params(model="realistic"), rng=np.random.default_rng(3))
        self.assertEqual(a.actual, b.actual)

    def test_realistic_unseeded_varies(self):
        p = _params(model="realistic", variability=50, duration_days=30, total_work=1000)
        runs = {tuple(simulate(p).actual) for _ in range(3)}
        self.assertGreater(len(runs), 1)

    def test_realistic_burn_within_envelope(self):
        for var in (20, 500):
            p = _params(model="realistic", variability=var, total_work=1000, seed=11)
            v = p.variability_fraction
            base = 1000 / 9
            s = simulate(p)
            for i in range(1, len(s.actual)):
                if s.actual[i] == 0:
                    continue
                burned = s.actual[i - 1] - s.actual[i]
                self.assertGreaterEqual(burned, base * (1 - v) - 0.011)
                self.assertLessEqual(burned, base * (1 + v) + 0.011)

    def test_realistic_zero_variability_is_linear(self):
        self.assertEqual(simulate(_params(model="realistic", variability=0)).actual,
                         simulate(_params()).actual)

    def test_custom_without_strategy_is_baseline(self):
        self.assertEqual(simulate(_params(model="custom")).actual, simulate(_params()).actual)

    def test_custom_strategy_applied(self):
        p = _params(model="custom", duration_days=11, custom_burn=lambda i, base, rem: 2 * base)
        s = simulate(p)
        self.assertEqual(s.actual[1], 80.0)
        self.assertEqual(s.actual[5], 0.0)

    def test_custom_negative_burn_floored(self):
        s = simulate(_params(model="custom", custom_burn=lambda i, base, rem: -5))
        self.assertEqual(s.actual, [100.0] * 10)

    def test_to_frame(self):
        df = simulate(_params(scope_changes_text="3:+10")).to_frame()
        self.assertEqual(list(df.columns), ["Day", "Label", "Ideal", "Actual", "Scope_Delta"])
        self.assertEqual(len(df), 10)
        self.assertEqual(int(df["Day"].iloc[0]), 1)
        self.assertEqual(df["Scope_Delta"].iloc[2], 10)


if __name__ == '__main__':
    unittest.main()
