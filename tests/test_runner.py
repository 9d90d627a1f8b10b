import pandas as pd

from disjoint_set.__main__ import main
from disjoint_set.pipeline import GroupingConfig
from disjoint_set.runner import group_file


def _write_pairs(path, **columns):
    pd.DataFrame(columns).to_csv(path, index=False)


def test_group_file_writes_assignments(tmp_path):
    source = tmp_path / "pairs.csv"
    output = tmp_path / "groups.csv"
    _write_pairs(source, left=[1, 3], right=[2, 4])

    result = group_file(source, output, GroupingConfig(use_tqdm=False, verbose=False, size=5))

    assert result is not None
    assert result.stats.group_count == 3
    saved = pd.read_csv(output)
    assert saved["group_size"].tolist() == [2, 2, 2, 2, 1]


def test_group_file_reports_missing_input(tmp_path, capsys):
    result = group_file(tmp_path / "missing.csv", tmp_path / "out.csv")
    assert result is None
    assert "ERROR: Input file not found" in capsys.readouterr().out


def test_group_file_reports_unsupported_format(tmp_path, capsys):
    source = tmp_path / "pairs.txt"
    source.write_text("left,right\n1,2\n")
    assert group_file(source, tmp_path / "out.csv") is None
    assert "Unsupported file format" in capsys.readouterr().out


def test_group_file_reports_missing_column(tmp_path, capsys):
    source = tmp_path / "pairs.csv"
    _write_pairs(source, src=[1], dst=[2])
    assert group_file(source, tmp_path / "out.csv") is None
    assert "Column 'left' not found" in capsys.readouterr().out


def test_group_file_reports_out_of_range_ids(tmp_path, capsys):
    source = tmp_path / "pairs.csv"
    _write_pairs(source, left=[0], right=[2])
    config = GroupingConfig(use_tqdm=False, verbose=False, size=2)
    assert group_file(source, tmp_path / "out.csv", config) is None
    assert "must be in range [1, 2]" in capsys.readouterr().out


def test_main_runs_end_to_end(tmp_path):
    source = tmp_path / "pairs.csv"
    output = tmp_path / "groups.csv"
    _write_pairs(source, u=[2, 3], v=[1, 2])

    exit_code = main(
        [str(source), str(output), "--left-column", "u", "--right-column", "v", "--disable-tqdm", "--quiet"]
    )

    assert exit_code == 0
    saved = pd.read_csv(output)
    assert saved["element"].tolist() == [1, 2, 3]
    assert saved["leader"].nunique() == 1


def test_main_returns_error_code_on_failure(tmp_path):
    assert main([str(tmp_path / "missing.csv"), str(tmp_path / "out.csv"), "--quiet"]) == 1


def test_group_file_reports_empty_csv(tmp_path, capsys):
    source = tmp_path / "pairs.csv"
    source.write_text("")
    assert group_file(source, tmp_path / "out.csv") is None
    out = capsys.readouterr().out
    assert "Could not parse" in out
    assert "Unsupported file format" not in out
