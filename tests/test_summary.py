import logging

import pandas as pd
import pytest

from fars.analysis.summary import summarize_frames, summary_to_mapping
from fars.data.summary import summarize_years

from conftest import write_year


def _frame(year, months):
    return pd.DataFrame({"MONTH": months, "year": year})


class TestSummarizeFrames:
    def test_pivot_shape_and_sparse_cells(self):
        summary = summarize_frames([
            _frame(2014, [2, 12]),
            None,
            _frame(2013, [1, 1, 2, 3, 3]),
        ])

        assert summary.index.name == "MONTH"
        assert summary.index.tolist() == [1, 2, 3, 12]
        assert summary.columns.tolist() == [2013, 2014]

        assert summary.loc[1, 2013] == 2
        assert summary.loc[2, 2013] == 1
        assert summary.loc[2, 2014] == 1
        assert summary.loc[12, 2014] == 1
        assert pd.isna(summary.loc[1, 2014])
        assert pd.isna(summary.loc[12, 2013])

    def test_counts_are_nullable_integers(self):
        summary = summarize_frames([_frame(2013, [1]), _frame(2014, [2])])
        assert all(str(dtype) == "Int64" for dtype in summary.dtypes)

    def test_single_month_round_trip(self):
        summary = summarize_frames([_frame(2020, [3] * 7)])
        assert summary.index.tolist() == [3]
        assert summary.columns.tolist() == [2020]
        assert summary.loc[3, 2020] == 7

    def test_all_missing_gives_empty_table(self):
        summary = summarize_frames([None, None])
        assert summary.empty
        assert summary.index.name == "MONTH"
        assert summary.columns.tolist() == []

    def test_no_frames(self):
        assert summarize_frames([]).empty


class TestSummaryToMapping:
    def test_absent_cells_are_omitted(self):
        summary = summarize_frames([_frame(2013, [1, 1, 2]), _frame(2014, [2])])
        assert summary_to_mapping(summary) == {
            1: {2013: 2},
            2: {2013: 1, 2014: 1},
        }

    def test_empty(self):
        assert summary_to_mapping(summarize_frames([None])) == {}


class TestSummarizeYears:
    def test_valid_years(self, data_dir):
        summary = summarize_years([2014, 2013], data_dir=data_dir)

        assert summary.columns.tolist() == [2013, 2014]
        assert summary_to_mapping(summary) == {
            1: {2013: 2},
            2: {2013: 1, 2014: 1},
            3: {2013: 2},
            12: {2014: 1},
        }

    def test_invalid_year_dropped_not_zero_filled(self, data_dir):
        expected = summarize_years([2013], data_dir=data_dir)
        with_invalid = summarize_years([2013, 9999], data_dir=data_dir)

        assert 9999 not in with_invalid.columns
        pd.testing.assert_frame_equal(with_invalid, expected)

    def test_only_invalid_years(self, data_dir, caplog):
        with caplog.at_level(logging.WARNING, logger="fars.data.reader"):
            summary = summarize_years([9998, 9999], data_dir=data_dir)

        assert summary.empty
        messages = [r.getMessage() for r in caplog.records]
        assert "invalid year: 9998" in messages
        assert "invalid year: 9999" in messages

    def test_skipped_years_reported(self, data_dir, caplog):
        with caplog.at_level(logging.INFO, logger="fars.data.summary"):
            summarize_years([2013, 2015], data_dir=data_dir)

        record = next(r for r in caplog.records if r.name == "fars.data.summary")
        assert record.skipped_years == [2015]
        assert "1/2 years" in record.getMessage()

    @pytest.mark.parametrize("n_rows", [1, 25])
    def test_all_march_file(self, tmp_path, n_rows):
        write_year(tmp_path, 2021, [{"STATE": 1, "MONTH": 3}] * n_rows)
        summary = summarize_years([2021], data_dir=tmp_path)

        assert summary.index.tolist() == [3]
        assert summary.loc[3, 2021] == n_rows
