import unittest

from lispr.lang import numerical
from lispr.lang.error import GenericException


class NumericalTestCase(unittest.TestCase):

    def test_number(self):
        should_fail = ["", "_", "__", "12a", "1.5", "١٢", "99999999999999999999", "9223372036854775808"]
        for case in should_fail:
            self.assertRaises(GenericException, numerical.number, case)

        should_pass = {"0": 0, "42": 42, "1_000": 1000, "1__0_": 10, "007": 7, "9223372036854775807": numerical.MAX}
        for case, result in should_pass.items():
            self.assertEqual(result, numerical.number(case), case)

    def test_negative_number(self):
        self.assertEqual(-42, numerical.number("42", negative=True))
        self.assertEqual(0, numerical.number("0", negative=True))
        self.assertEqual(numerical.MIN, numerical.number("9223372036854775808", negative=True))
        self.assertRaises(GenericException, numerical.number, "9223372036854775809", negative=True)

    def test_wrap(self):
        cases = {
            0: 0,
            -1: -1,
            numerical.MAX + 1: numerical.MIN,
            numerical.MIN - 1: numerical.MAX,
            1 << 64: 0,
            (1 << 64) + 5: 5,
        }
        for case, result in cases.items():
            self.assertEqual(result, numerical.wrap(case), case)

    def test_add_mul(self):
        self.assertEqual(5, numerical.add(2, 3))
        self.assertEqual(numerical.MIN, numerical.add(numerical.MAX, 1))
        self.assertEqual(-6, numerical.mul(2, -3))
        self.assertEqual(numerical.MIN, numerical.mul(numerical.MIN, -1))


if __name__ == '__main__':
    unittest.main()
