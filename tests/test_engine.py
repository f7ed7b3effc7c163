"""
Unit tests for full layout passes.
"""

import pytest
from smartgrid.config import GridConfig
from smartgrid.engine import compute_layout
from smartgrid.layouts.column_resolver import ColumnResolver
from smartgrid.protocol import BalanceMode, FillPolicy, MinWidthConfig, UnitContext
from smartgrid.units import UnitResolver


def row_lengths(result):
    return [len(row) for row in result.rows]


@pytest.mark.unit
class TestUniformItems:
    """Items without size specs."""

    def test_seven_items_three_columns(self):
        result = compute_layout([None] * 7, GridConfig(max_columns=3))

        assert row_lengths(result) == [3, 2, 2]
        assert result.grid_resolution == 6
        assert result.spans == [2, 2, 2, 3, 3, 3, 3]
        assert result.effective_columns == 3
        assert result.columns == 3

    def test_even_distribution(self):
        result = compute_layout([None] * 6, GridConfig(max_columns=3))
        assert result.grid_resolution == 3
        assert result.spans == [1] * 6

    def test_empty(self):
        result = compute_layout([], GridConfig(max_columns=4))
        assert result.rows == []
        assert result.spans == []
        assert result.grid_resolution == 0
        assert result.effective_columns == 4
        assert result.columns == 0

    def test_single_item(self):
        result = compute_layout([None])
        assert result.grid_resolution == 1
        assert result.spans == [1]

    def test_last_row_keeps_width(self):
        config = GridConfig(max_columns=3, last_row_policy=FillPolicy.PRESERVE_RAW_SIZE)
        result = compute_layout([None] * 5, config)
        assert result.grid_resolution == 6
        assert result.spans == [2, 2, 2, 2, 2]

    def test_row_spans(self):
        result = compute_layout([None] * 7, GridConfig(max_columns=3))
        assert result.row_spans() == [[2, 2, 2], [3, 3], [3, 3]]


@pytest.mark.unit
class TestBalanceModes:
    """Greedy rows with expanded or preserved trailing items."""

    def test_expand(self):
        config = GridConfig(max_columns=3, balance=BalanceMode.EXPAND)
        result = compute_layout([None] * 7, config)
        assert row_lengths(result) == [3, 3, 1]
        assert result.grid_resolution == 3
        assert result.spans == [1, 1, 1, 1, 1, 1, 3]

    def test_preserve(self):
        config = GridConfig(max_columns=3, balance=BalanceMode.PRESERVE)
        result = compute_layout([None] * 7, config)
        assert row_lengths(result) == [3, 3, 1]
        assert result.spans == [1] * 7

    def test_preserve_with_two_orphans(self):
        config = GridConfig(max_columns=4, balance="preserve")
        result = compute_layout([None] * 6, config)
        # LCM(4, 2) tracks, every item as wide as a full-row item
        assert result.grid_resolution == 4
        assert result.spans == [1] * 6


@pytest.mark.unit
class TestSizedItems:
    """Items with semantic or numeric size specs."""

    def test_mixed_sizes(self):
        result = compute_layout(["large", None, None, "medium", None])

        assert [[item.size for item in row] for row in result.rows] == [
            [3],
            [1, 1],
            [2, 1],
        ]
        assert result.grid_resolution == 3
        assert result.spans == [3, 2, 1, 2, 1]

    def test_sizes_capped(self):
        result = compute_layout([5, "large"], GridConfig(max_columns=2))
        assert [item.size for row in result.rows for item in row] == [2, 2]
        assert result.spans == [2, 2]

    def test_single_row_resolution_is_row_total(self):
        result = compute_layout(["medium", None], GridConfig(max_columns=4))
        assert result.grid_resolution == 3
        assert result.spans == [2, 1]

    def test_all_small_uses_distribution(self):
        result = compute_layout(["small"] * 7, GridConfig(max_columns=3))
        assert row_lengths(result) == [3, 2, 2]
        assert result.spans == [2, 2, 2, 3, 3, 3, 3]

    def test_small_among_plain_items_splits_evenly(self):
        result = compute_layout(["small"] + [None] * 6, GridConfig(max_columns=3))
        assert result.grid_resolution == 6
        assert result.row_spans() == [[2, 2, 2], [3, 3], [3, 3]]

    def test_numeric_one_among_plain_items_splits_evenly(self):
        result = compute_layout([None, None, "1", None, None], GridConfig(max_columns=3))
        assert result.row_spans() == [[2, 2, 2], [3, 3]]

    def test_preserve_keeps_explicit_sizes(self):
        config = GridConfig(max_columns=4, fill_policy="preserve-raw-size")
        result = compute_layout(["medium", None, 3], config)
        assert result.spans == [2, 1, 3]


@pytest.mark.unit
class TestResponsive:
    """Container width narrows the column count."""

    @pytest.fixture
    def config(self):
        return GridConfig(
            max_columns=3, min_widths=MinWidthConfig(small="200px", gap="16px")
        )

    def test_wide_container_keeps_max(self, config):
        result = compute_layout([None] * 7, config, width=1200)
        assert result.effective_columns == 3

    def test_narrow_container(self, config):
        result = compute_layout([None] * 7, config, width=500)
        assert result.effective_columns == 2
        assert row_lengths(result) == [2, 2, 2, 1]
        assert result.grid_resolution == 2
        assert result.spans == [1, 1, 1, 1, 1, 1, 2]

    def test_single_column(self, config):
        result = compute_layout([None, "large", None], config, width=50)
        assert result.single_column
        assert row_lengths(result) == [1, 1, 1]
        assert result.grid_resolution == 1
        assert result.spans == [1, 1, 1]

    def test_no_width_means_no_narrowing(self, config):
        result = compute_layout([None] * 7, config)
        assert result.effective_columns == 3

    def test_large_items_drive_narrowing(self):
        config = GridConfig(
            max_columns=6,
            min_widths=MinWidthConfig(small="200px", large="900px", gap="0px"),
        )
        result = compute_layout(["large", None], config, width=1000)
        assert result.effective_columns == 3
        assert result.spans == [3, 3]

    def test_column_resolver_reused(self, config):
        unit_resolver = UnitResolver()
        column_resolver = ColumnResolver(unit_resolver.resolve)
        first = compute_layout([None] * 4, config, 500, unit_resolver, column_resolver)
        second = compute_layout([None] * 4, config, 500, unit_resolver, column_resolver)
        assert first == second

    def test_column_resolver_alone_resolves_lengths(self, config):
        column_resolver = ColumnResolver(UnitResolver(UnitContext()).resolve)
        result = compute_layout([None] * 4, config, 500, column_resolver=column_resolver)
        assert result.effective_columns == 2

    def test_mismatched_resolvers_rejected(self, config):
        column_resolver = ColumnResolver(UnitResolver().resolve)
        with pytest.raises(ValueError):
            compute_layout([None] * 4, config, 500, UnitResolver(), column_resolver)

    def test_unsupported_unit_reported(self):
        messages = []
        config = GridConfig(max_columns=3, min_widths=MinWidthConfig(small="20%"))
        result = compute_layout(
            [None] * 4, config, 800, UnitResolver(report=messages.append)
        )
        assert messages
        assert 1 <= result.effective_columns <= 3
        assert sum(result.spans) > 0


@pytest.mark.unit
class TestInvariants:
    """Properties that hold for every input."""

    def test_idempotent(self):
        config = GridConfig(max_columns=4, last_row_policy="preserve-raw-size")
        sizes = [None, "medium", None, None, 3, None, None]
        assert compute_layout(sizes, config) == compute_layout(sizes, config)

    @pytest.mark.parametrize("max_columns", range(1, 13))
    def test_filled_rows_sum_to_resolution(self, max_columns):
        config = GridConfig(max_columns=max_columns)
        for count in range(1, 30):
            result = compute_layout([None] * count, config)
            for spans in result.row_spans():
                assert sum(spans) == result.grid_resolution

    @pytest.mark.parametrize(
        "sizes",
        [
            ["large", None, None, "medium", None],
            [2, 1, 1, 2, 1, 3],
            ["medium", "medium", None, "small", None, "large", None],
        ],
    )
    def test_mixed_rows_sum_to_resolution(self, sizes):
        result = compute_layout(sizes, GridConfig(max_columns=3))
        for spans in result.row_spans():
            assert sum(spans) == result.grid_resolution

    def test_raw_rows_sum_to_unit_total(self):
        config = GridConfig(max_columns=3, fill_policy="preserve-raw-size")
        result = compute_layout(["medium", None, None, "large"], config)
        for row, spans in zip(result.rows, result.row_spans()):
            assert sum(spans) == sum(item.size for item in row)
