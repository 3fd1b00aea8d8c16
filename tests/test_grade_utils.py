import unittest

from cgpa_api.utils.grade_utils import GRADE_POINTS, Grade, grading_scale, parse_grade


class GradeTests(unittest.TestCase):
    def test_points_table(self):
        self.assertEqual([g.points for g in Grade], [5, 4, 3, 2, 1, 0])
        self.assertEqual(set(GRADE_POINTS), set(Grade))

    def test_parse_grade(self):
        self.assertIs(parse_grade("B"), Grade.B)
        self.assertIs(parse_grade(Grade.F), Grade.F)
        self.assertIsNone(parse_grade("b"))
        self.assertIsNone(parse_grade("G"))
        self.assertIsNone(parse_grade(" A"))
        self.assertIsNone(parse_grade(None))

    def test_grading_scale(self):
        self.assertEqual(grading_scale(), {"A": 5, "B": 4, "C": 3, "D": 2, "E": 1, "F": 0})


if __name__ == "__main__":
    unittest.main()
