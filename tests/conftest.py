"""Shared sample reports for the benchparse test suite."""

import pytest

README_EXAMPLE: str = """commit: 7cd9055
commit-time: 2016-02-11T13:25:45-0500
goos: darwin
goarch: amd64
cpu: Intel(R) Core(TM) i7-4980HQ CPU @ 2.80GHz
cpu-count: 8
cpu-physical-count: 4
os: Mac OS X 10.11.3
mem: 16 GB

BenchmarkDecode/text=digits/level=speed/size=1e4-8   \t     100\t    151731 ns/op\t  61.07 MB/s\t   40515 B/op\t       8 allocs/op
BenchmarkDecode/text=digits/level=speed/size=1e5-8   \t      10\t   1394622 ns/op\t  62.14 MB/s\t   40612 B/op\t       9 allocs/op
BenchmarkDecode/text=digits/level=speed/size=1e6-8   \t       1\t  14319339 ns/op\t  63.21 MB/s\t   40709 B/op\t       10 allocs/op
BenchmarkDecode/text=digits/level=default/size=1e4-8   \t     100\t    156924 ns/op\t  64.28 MB/s\t   40806 B/op\t       11 allocs/op
BenchmarkDecode/text=digits/level=default/size=1e5-8   \t      10\t   1446555 ns/op\t  65.35 MB/s\t   40903 B/op\t       12 allocs/op
BenchmarkDecode/text=digits/level=default/size=1e6-8   \t       1\t  14838678 ns/op\t  66.42 MB/s\t   41000 B/op\t       13 allocs/op
BenchmarkDecode/text=digits/level=best/size=1e4-8   \t     100\t    162117 ns/op\t  67.49 MB/s\t   41097 B/op\t       14 allocs/op
BenchmarkDecode/text=digits/level=best/size=1e5-8   \t      10\t   1498488 ns/op\t  68.56 MB/s\t   41194 B/op\t       15 allocs/op
BenchmarkDecode/text=digits/level=best/size=1e6-8   \t       1\t  15358017 ns/op\t  69.63 MB/s\t   41291 B/op\t       16 allocs/op
BenchmarkDecode/text=twain/level=speed/size=1e4-8   \t     100\t    151731 ns/op\t  61.07 MB/s\t   40515 B/op\t       8 allocs/op
BenchmarkDecode/text=twain/level=speed/size=1e5-8   \t      10\t   1394622 ns/op\t  62.14 MB/s\t   40612 B/op\t       9 allocs/op
BenchmarkDecode/text=twain/level=speed/size=1e6-8   \t       1\t  14319339 ns/op\t  63.21 MB/s\t   40709 B/op\t       10 allocs/op
BenchmarkDecode/text=twain/level=default/size=1e4-8   \t     100\t    156924 ns/op\t  64.28 MB/s\t   40806 B/op\t       11 allocs/op
BenchmarkDecode/text=twain/level=default/size=1e5-8   \t      10\t   1446555 ns/op\t  65.35 MB/s\t   40903 B/op\t       12 allocs/op
BenchmarkDecode/text=twain/level=default/size=1e6-8   \t       1\t  14838678 ns/op\t  66.42 MB/s\t   41000 B/op\t       13 allocs/op
BenchmarkDecode/text=twain/level=best/size=1e4-8   \t     100\t    162117 ns/op\t  67.49 MB/s\t   41097 B/op\t       14 allocs/op
BenchmarkDecode/text=twain/level=best/size=1e5-8   \t      10\t   1498488 ns/op\t  68.56 MB/s\t   41194 B/op\t       15 allocs/op
BenchmarkDecode/text=twain/level=best/size=1e6-8   \t       1\t  15358017 ns/op\t  69.63 MB/s\t   41291 B/op\t       16 allocs/op
BenchmarkEncode/text=digits/level=speed/size=1e4-8   \t     100\t    151731 ns/op\t  61.07 MB/s\t   40515 B/op\t       8 allocs/op
BenchmarkEncode/text=digits/level=speed/size=1e5-8   \t      10\t   1394622 ns/op\t  62.14 MB/s\t   40612 B/op\t       9 allocs/op
BenchmarkEncode/text=digits/level=speed/size=1e6-8   \t       1\t  14319339 ns/op\t  63.21 MB/s\t   40709 B/op\t       10 allocs/op
BenchmarkEncode/text=digits/level=default/size=1e4-8   \t     100\t    156924 ns/op\t  64.28 MB/s\t   40806 B/op\t       11 allocs/op
BenchmarkEncode/text=digits/level=default/size=1e5-8   \t      10\t   1446555 ns/op\t  65.35 MB/s\t   40903 B/op\t       12 allocs/op
BenchmarkEncode/text=digits/level=default/size=1e6-8   \t       1\t  14838678 ns/op\t  66.42 MB/s\t   41000 B/op\t       13 allocs/op
BenchmarkEncode/text=digits/level=best/size=1e4-8   \t     100\t    162117 ns/op\t  67.49 MB/s\t   41097 B/op\t       14 allocs/op
BenchmarkEncode/text=digits/level=best/size=1e5-8   \t      10\t   1498488 ns/op\t  68.56 MB/s\t   41194 B/op\t       15 allocs/op
BenchmarkEncode/text=digits/level=best/size=1e6-8   \t       1\t  15358017 ns/op\t  69.63 MB/s\t   41291 B/op\t       16 allocs/op
"""
"""Go proposal example report: 9 configuration lines, 27 results."""

NOISY_EXAMPLE: str = """goos: linux

invalid line
InvalidKey: bob
 indented: bob
BenchmarkInvalidLine 1
BenchmarkInvalidLine 1 10
Benchmarkinvalid 1 10 ns/op
TestSomething 1 10 ns/op
BenchmarkDecode-8 \t 100 \t 154125 ns/op
=== RUN   TestSomething
BenchmarkEncode-8 100 94125 ns/op 12 B/op
PASS
ok  \tcompress/flate\t3.012s
"""
"""Report with interleaved noise: 1 configuration line, 2 results."""

BAD_NUMBER_EXAMPLE: str = """commit: 7cd9055
BenchmarkGood 100 154125 ns/op
BenchmarkInvalidLine 1 ten ns/op
BenchmarkAlsoGood 100 94125 ns/op
"""
"""Result-shaped line with a non-numeric value between two good results."""


@pytest.fixture()
def readme_example() -> str:
    """Return the 9-config / 27-result sample report."""
    return README_EXAMPLE


@pytest.fixture()
def noisy_example() -> str:
    """Return the sample report with interleaved noise lines."""
    return NOISY_EXAMPLE


@pytest.fixture()
def bad_number_example() -> str:
    """Return the sample report containing a non-numeric value."""
    return BAD_NUMBER_EXAMPLE
