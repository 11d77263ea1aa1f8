import logging
from itertools import permutations
from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose as numpy_allclose

from structural_shapes import (
    BoxBeam, CompositeShape, DegenerateCompositeError, IBeam, Pipe,
    Rectangle, Rod
)
from structural_shapes.core.logger_mixin import table_members


def assert_allclose(actual, desired, err_msg=''):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=1e-7)


def hollow_square(center=(2.0, 1.5)):
    return (CompositeShape()
            .add(Rectangle(3.0, 3.0, center_of_gravity=center))
            .sub(Rectangle(1.0, 1.0, center_of_gravity=center)))


def t_section():
    return (CompositeShape()
            .add(Rectangle(4.0, 1.0, center_of_gravity=(0.0, 3.5)))
            .add(Rectangle(1.0, 3.0, center_of_gravity=(0.0, 1.5))))


class TestCompositeShapeBuilder(TestCase):

    def test_empty(self):
        c = CompositeShape()
        self.assertEqual(len(c), 0)
        self.assertEqual(c.area, 0)
        self.assertEqual(c.moi_x, 0)
        self.assertEqual(c.moi_y, 0)

    def test_chaining(self):
        c = CompositeShape()
        self.assertIs(c.add(Rod(1.0)), c)
        self.assertIs(c.sub(Rod(0.5)), c)
        self.assertEqual([sign for sign, _ in c], [1, -1])
        self.assertEqual(len(c.members), 2)

    def test_members_argument(self):
        c = CompositeShape([(1, Rod(1.0)), (-1, Rod(0.5))])
        assert_allclose(c.area, Pipe(1.0, 0.5).area)

    def test_members_are_copied(self):
        rect = Rectangle(2.0, 2.0)
        c = CompositeShape().add(rect)
        rect.set_cog((5.0, 5.0))
        self.assertEqual(
            c.members[0][1].center_of_gravity, (0.0, 0.0),
            'Moving a shape after adding it must not affect the composite.'
        )
        self.assertIsNot(c.members[0][1], rect)

    def test_invalid_members(self):
        with self.assertRaises(TypeError):
            CompositeShape().add(3.0)
        with self.assertRaises(TypeError):
            CompositeShape().add(CompositeShape().add(Rod(1.0)))
        with self.assertRaises(ValueError):
            CompositeShape([(2, Rod(1.0))])

    def test_repr(self):
        self.assertTrue(repr(hollow_square()).startswith(
            'CompositeShape(+ Rectangle('
        ))


class TestCompositeShapeProperties(TestCase):

    def test_equals_box_beam(self):
        c = hollow_square(center=(0.0, 0.0))
        box = BoxBeam(3.0, 3.0, 1.0)
        assert_allclose(c.area, box.area)
        assert_allclose(c.moi_x, box.moi_x)
        assert_allclose(c.moi_y, box.moi_y)
        assert_allclose(c.polar_moi, box.polar_moi)

    def test_additivity(self):
        members = [
            (1, Rectangle(4.0, 2.0, center_of_gravity=(0.0, 1.0))),
            (1, IBeam(2.0, 3.0, 0.5, 0.25, center_of_gravity=(1.0, -2.0))),
            (-1, Rod(0.5, center_of_gravity=(0.5, 1.0))),
            (1, Pipe(1.0, 0.2, center_of_gravity=(-3.0, 0.0))),
            (-1, BoxBeam(1.0, 0.5, 0.1, center_of_gravity=(-1.0, 1.0))),
        ]
        expected = [
            sum(sign * getattr(shape, prop) for sign, shape in members)
            for prop in ('area', 'moi_x', 'moi_y')
        ]
        for order in permutations(members):
            c = CompositeShape(order)
            assert_allclose(
                [c.area, c.moi_x, c.moi_y], expected,
                err_msg='Composite properties must be the signed sum of the '
                        'member properties in any order.'
            )

    def test_static_moment(self):
        s_x, s_y = t_section().static_moment
        assert_allclose(s_x, 4 * 3.5 + 3 * 1.5)
        assert_allclose(s_y, 0.0)

    def test_summary(self):
        table = hollow_square().summary(decimals=3)
        self.assertIn('Rectangle', table)
        self.assertIn('Sum', table)
        self.assertIn('8.000', table)

    def test_outline(self):
        outline = hollow_square().outline()
        self.assertEqual(outline.area, 8.0)
        self.assertEqual(outline.bounds, (0.5, 0.0, 3.5, 3.0))
        self.assertTrue(CompositeShape().outline().is_empty)


class TestCompositeShapeCentroid(TestCase):

    def test_calculate_cog(self):
        c = hollow_square()
        cog = c.calculate_cog()
        assert_allclose(cog, (2.0, 1.5))

    def test_update_cog(self):
        c = hollow_square()
        shift = c.update_cog()
        assert_allclose(shift, (2.0, 1.5))
        assert_allclose(c.calculate_cog(), (0.0, 0.0))
        for _, shape in c:
            assert_allclose(shape.center_of_gravity, (0.0, 0.0))
        assert_allclose(c.moi_x, BoxBeam(3.0, 3.0, 1.0).moi_x)

    def test_update_cog_idempotent(self):
        c = t_section()
        c.update_cog()
        first = [shape.center_of_gravity for _, shape in c]
        moi = c.moi_x, c.moi_y
        assert_allclose(c.update_cog(), (0.0, 0.0))
        assert_allclose(
            [shape.center_of_gravity for _, shape in c], first,
            err_msg='A second update_cog must not move the members.'
        )
        assert_allclose((c.moi_x, c.moi_y), moi)

    def test_update_cog_keeps_callers_shapes(self):
        rect = Rectangle(2.0, 2.0, center_of_gravity=(3.0, 3.0))
        c = CompositeShape().add(rect)
        c.update_cog()
        self.assertEqual(rect.center_of_gravity, (3.0, 3.0))

    def test_centroidal_moi(self):
        c = t_section()
        y_c = (4 * 3.5 + 3 * 1.5) / 7
        expected = (4 * 1 / 12 + 4 * (3.5 - y_c) ** 2 +
                    1 * 27 / 12 + 3 * (1.5 - y_c) ** 2)
        assert_allclose(c.calculate_cog(), (0.0, y_c))
        assert_allclose(c.centroidal_moi_x, expected)
        assert_allclose(c.centroidal_moi_y, (1 * 64 + 3 * 1) / 12)
        c.update_cog()
        assert_allclose(
            c.moi_x, expected,
            err_msg='After update_cog the moment about the global x-axis is '
                    'the centroidal moment.'
        )

    def test_pipe_member(self):
        c = CompositeShape().add(Pipe(2.0, 1.0, center_of_gravity=(1.0, 1.0)))
        c.update_cog()
        assert_allclose(c.members[0][1].center_of_gravity, (0.0, 0.0))
        assert_allclose(c.moi_x, 15 * np.pi / 4)

    def test_degenerate(self):
        with self.assertRaises(DegenerateCompositeError):
            CompositeShape().calculate_cog()

        c = CompositeShape().add(Rod(1.0, center_of_gravity=(1.0, 1.0)))
        c.sub(Rod(1.0, center_of_gravity=(1.0, 1.0)))
        with self.assertRaises(ZeroDivisionError) as ctx:
            c.update_cog()
        self.assertEqual(ctx.exception.net_area, 0.0)
        assert_allclose(ctx.exception.gross_area, 2 * np.pi)
        for _, shape in c:
            self.assertEqual(
                shape.center_of_gravity, (1.0, 1.0),
                'A failed update_cog must leave the members untouched.'
            )
        with self.assertRaises(DegenerateCompositeError):
            _ = c.centroidal_moi_x


class TestCompositeShapeLogging(TestCase):

    name = 'structural_shapes.core.composite.CompositeShape'

    def setUp(self):
        self.log = logging.getLogger(self.name)
        self.handlers = self.log.handlers[:]
        self.level = self.log.level

    def tearDown(self):
        self.log.handlers = self.handlers
        self.log.setLevel(self.level)

    def test_debug_flag(self):
        c = CompositeShape(debug=True)
        self.assertIs(c.logger, self.log)
        self.assertEqual(c.logger.level, logging.DEBUG)
        self.assertTrue(any(isinstance(h, logging.StreamHandler)
                            for h in c.logger.handlers))

    def test_debug_is_per_instance(self):
        CompositeShape(debug=True)
        c = CompositeShape()
        self.assertEqual(
            c.logger.level, logging.WARNING,
            "A composite created without debug must not inherit the DEBUG "
            "level of an earlier debug composite."
        )
        self.assertFalse(c.logger.isEnabledFor(logging.DEBUG))

    def test_update_cog_logs(self):
        c = hollow_square()
        with self.assertLogs(self.name, level='INFO') as logs:
            c.update_cog()
        self.assertTrue(any('Shifted 2 members' in line
                            for line in logs.output))

    def test_degenerate_logs_error(self):
        c = CompositeShape()
        with self.assertLogs(self.name, level='ERROR'):
            with self.assertRaises(DegenerateCompositeError):
                c.calculate_cog()


class TestTableMembers(TestCase):

    def test_sum_row(self):
        table = table_members([[1, 2.0]], ['Nr.', 'A'], total=[None, 2.0],
                              decimals=2)
        self.assertIn('Sum', table)
        self.assertIn('2.00', table)
