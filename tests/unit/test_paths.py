from pathlib import Path

import pytest

from toss.errors import PathConflictError, UsageError
from toss.models.paths import Direction, PathResolver, is_relative
from toss.services.config import TossConfig


def test_relative_operand_joins_cwd(config: TossConfig) -> None:
    resolver = PathResolver(config)

    entry = resolver.resolve("notes.txt", Direction.TOSS, cwd="/srv/project")

    assert entry.source == "/srv/project/notes.txt"
    assert entry.destination == f"{config.bin_root}/srv/project/notes.txt"


def test_absolute_operand_used_as_given(config: TossConfig) -> None:
    resolver = PathResolver(config)

    entry = resolver.resolve("/etc/hosts.bak", Direction.TOSS, cwd="/ignored")

    assert entry.source == "/etc/hosts.bak"
    assert entry.destination == f"{config.bin_root}/etc/hosts.bak"


def test_recover_swaps_source_and_destination(config: TossConfig) -> None:
    resolver = PathResolver(config)

    entry = resolver.resolve("/srv/data.csv", Direction.RECOVER)

    assert entry.source == f"{config.bin_root}/srv/data.csv"
    assert entry.destination == "/srv/data.csv"


@pytest.mark.parametrize(
    "operand",
    ["a.txt", "nested/dir/b.txt", "/abs/c.txt", "./d.txt", "dir/", "x/../y.txt"],
)
def test_toss_and_recover_are_inverses(config: TossConfig, operand: str) -> None:
    resolver = PathResolver(config)

    tossed = resolver.resolve(operand, Direction.TOSS, cwd="/home/user/work")
    recovered = resolver.resolve(operand, Direction.RECOVER, cwd="/home/user/work")

    assert tossed == recovered.reversed()
    assert tossed.destination == config.bin_prefix + tossed.source


def test_paths_are_normalised(config: TossConfig) -> None:
    resolver = PathResolver(config)

    entry = resolver.resolve("./sub/../file.txt", Direction.TOSS, cwd="/w")
    trailing = resolver.resolve("/w/dir/", Direction.TOSS)

    assert entry.source == "/w/file.txt"
    assert trailing.source == "/w/dir"


def test_tilde_expands_to_configured_home(config: TossConfig) -> None:
    resolver = PathResolver(config)

    entry = resolver.resolve("~/draft.md", Direction.TOSS)

    assert entry.source == str(config.home / "draft.md")


def test_operand_inside_bin_is_rejected(config: TossConfig) -> None:
    resolver = PathResolver(config)

    with pytest.raises(PathConflictError, match="do not include recycle directory"):
        resolver.resolve(f"{config.bin_root}/etc/hosts", Direction.RECOVER)


def test_relative_operand_resolving_into_bin_is_rejected(config: TossConfig) -> None:
    resolver = PathResolver(config)

    with pytest.raises(PathConflictError):
        resolver.resolve("tmp/file.txt", Direction.TOSS, cwd=str(config.bin_root))


def test_sibling_with_bin_prefix_is_not_inside_bin(config: TossConfig) -> None:
    resolver = PathResolver(config)

    assert resolver.is_inside_bin(str(config.bin_root) + "-old/file") is False
    assert resolver.is_inside_bin(str(config.bin_root / "file")) is True


def test_is_relative_markers() -> None:
    assert is_relative("file.txt")
    assert is_relative("./file.txt")
    assert not is_relative("/file.txt")
    assert not is_relative("~/file.txt")
    assert not is_relative("\\file.txt")


def test_resolution_does_not_touch_filesystem(config: TossConfig, tmp_path: Path) -> None:
    resolver = PathResolver(config)
    missing = tmp_path / "missing.txt"

    entry = resolver.resolve(str(missing), Direction.TOSS)

    assert entry.source == str(missing)
    assert not missing.exists()


def test_backslash_rooted_operand_is_rejected(config: TossConfig) -> None:
    resolver = PathResolver(config)

    with pytest.raises(UsageError, match="backslash-rooted"):
        resolver.resolve("\\share\\file.txt", Direction.TOSS)
