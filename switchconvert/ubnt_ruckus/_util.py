"""Private helper functions for property lines and port lists."""

from __future__ import annotations


def split_property_line(line: str) -> tuple[str, str] | None:
    """Split ``key=value`` on the first ``=``; return None if there is none."""
    key, sep, value = line.partition("=")
    if not sep:
        return None
    return key, value


def build_property_map(lines: list[str]) -> dict[str, str]:
    """Build a key -> value lookup from property lines.

    The first occurrence of a key wins, matching a first-match linear scan.
    Lines without ``=`` are ignored.
    """
    props: dict[str, str] = {}
    for line in lines:
        kv = split_property_line(line)
        if kv is None:
            continue
        props.setdefault(kv[0], kv[1])
    return props


def ethe_port_list(numbers: list[int], prefix: str = "1/1/") -> str:
    """Return e.g. 'ethe 1/1/3 ethe 1/1/5' for [3, 5]."""
    return " ".join(f"ethe {prefix}{n}" for n in numbers)


def format_port_range(numbers: list[int]) -> str:
    """Format port numbers into compact ranges.

    E.g. [1, 2, 3, 7, 9, 10] -> '1-3, 7, 9-10'
    """
    if not numbers:
        return ""
    nums = sorted(set(numbers))
    ranges: list[tuple[int, int]] = []
    start = end = nums[0]
    for n in nums[1:]:
        if n == end + 1:
            end = n
        else:
            ranges.append((start, end))
            start = end = n
    ranges.append((start, end))
    return ", ".join(str(s) if s == e else f"{s}-{e}" for s, e in ranges)
