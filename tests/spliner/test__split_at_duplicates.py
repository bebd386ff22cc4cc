"""Tests for splitting key points at duplicate x values."""

import pytest
import torch


class TestSplitAtDuplicates:
    @pytest.mark.parametrize(
        "x, expected",
        [
            ([0.0, 1.0], [(0, 1)]),
            ([0.0, 1.0, 2.0, 3.0], [(0, 3)]),
            ([0.0, 1.0, 1.0, 2.0], [(0, 1), (2, 3)]),
            ([0.0, 1.0, 1.0, 2.0, 2.0, 3.0], [(0, 1), (2, 3), (4, 5)]),
            ([0.0, 1.0, 1.0, 1.0, 2.0], [(0, 1), (2, 2), (3, 4)]),
            ([0.0, 0.0, 1.0], [(0, 0), (1, 2)]),
        ],
    )
    def test_runs(self, x, expected):
        """Test index runs for several duplicate patterns."""
        from spliner import split_at_duplicates

        assert split_at_duplicates(torch.tensor(x, dtype=torch.float64)) == expected

    def test_runs_cover_every_index_once(self):
        """Test that runs cover each index exactly once."""
        from spliner import split_at_duplicates

        x = torch.tensor([0.0, 0.5, 0.5, 0.7, 1.0, 1.0, 2.0, 3.0])

        runs = split_at_duplicates(x)
        indices = [i for first, last in runs for i in range(first, last + 1)]

        assert indices == list(range(x.shape[0]))
