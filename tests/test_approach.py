import unittest
from pydantic import ValidationError
from greensplit.domain.models import Approach, ApproachProfile

def make_approach(density: int = 1, wait: int = 1) -> Approach:
    return Approach(index=0, profile=ApproachProfile(density=density, waitFactor=wait))

class TestApproach(unittest.TestCase):
    def test_arrivals_divide_density_by_cycles(self):
        approach = make_approach(density=25)
        self.assertEqual(approach.inject_arrivals(10, 300), 2)
        self.assertEqual(approach.queue_length(), 2)

        approach.inject_arrivals(10, 300)
        self.assertEqual(approach.queue_length(), 4)

    def test_arrivals_guard_zero_cycles(self):
        approach = make_approach(density=7)
        self.assertEqual(approach.inject_arrivals(0, 300), 7)

    def test_low_density_adds_nothing(self):
        approach = make_approach(density=4)
        self.assertEqual(approach.inject_arrivals(10, 300), 0)
        self.assertEqual(approach.queue_length(), 0)

    def test_serve_one_removes_head(self):
        approach = make_approach(density=3)
        approach.inject_arrivals(1, 300)
        approach.serve_one()
        self.assertEqual(approach.queue_length(), 2)

    def test_serve_one_on_empty_queue_is_noop(self):
        approach = make_approach()
        for _ in range(100):
            approach.serve_one()
        self.assertEqual(approach.queue_length(), 0)

    def test_profile_is_immutable(self):
        approach = make_approach(density=2, wait=3)
        with self.assertRaises(ValidationError):
            approach.profile.density = 9

    def test_profile_rejects_bad_inputs(self):
        with self.assertRaises(ValidationError):
            ApproachProfile(density=-1, waitFactor=1)
        with self.assertRaises(ValidationError):
            ApproachProfile(density=1, waitFactor=0)

if __name__ == '__main__':
    unittest.main()
