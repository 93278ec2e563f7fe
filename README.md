# cfspeedtest

Small building blocks for a network speed test tool: parsing human-written
time limits, formatting byte counts and bit rates, and exiting with a
well-defined status. The package has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parsing durations

`cfspeedtest.duration.parse_duration(text)` accepts either a plain number of
seconds, optionally followed by `s`, or minutes and seconds in the form
`<n>m<n>s`. Whitespace around and between the parts is allowed and the
letters may be in either case. Only ASCII digits are accepted. The result is a
`datetime.timedelta`.

```python
from cfspeedtest.duration import parse_duration, DurationError

parse_duration("66")        # timedelta(seconds=66)
parse_duration(" 45 S ")    # timedelta(seconds=45)
parse_duration("1m30s")     # timedelta(seconds=90)

try:
    parse_duration("1h")
except DurationError as exc:
    print(exc)
```

`DurationError` is a subclass of `ValueError`. It is raised when the text
matches neither form, when a number does not fit in a signed 64-bit integer,
or when the resulting duration is too large for `timedelta`.

## Formatting units

`cfspeedtest.units` provides three functions that take a non-negative integer
and return a string:

- `bits_per_second_si(bits)` — decimal prefixes, unit `bit/s`
- `bytes_si(count)` — decimal prefixes (k, M, G, T), unit `B`
- `bytes_iec(count)` — binary prefixes (Ki, Mi, Gi, Ti), unit `B`

Values below one step (1000 or 1024) are printed as plain integers. Scaled
values under 100 keep three significant digits with trailing zeroes dropped;
larger values are shown without decimals. Anything from a tera step upward
stays in the `T` / `Ti` unit. A negative value raises `ValueError`.

```python
from cfspeedtest.units import bits_per_second_si, bytes_si, bytes_iec

bits_per_second_si(950)          # '950 bit/s'
bits_per_second_si(123_456_789)  # '123 Mbit/s'
bytes_si(1_500)                  # '1.5 kB'
bytes_iec(2_048)                 # '2 KiB'
```

## Exit statuses

`cfspeedtest.exitcodes.ExitStatus` is an `IntEnum` of process exit codes:
`OK` (0), `FATAL` (1), `PANIC` (2), `GENERAL_ERROR` (11), `INVALID_FLAG` (12),
`INVALID_ARG` (13) and `INVALID_CONFIG` (14).

`terminate(status, *errors)` writes each error (an exception or a string) to
standard error as `error: <message>`, one per line, and then raises
`SystemExit` with the given status.

```python
from cfspeedtest.exitcodes import ExitStatus, terminate

terminate(ExitStatus.INVALID_ARG, ValueError("no arguments allowed"))
```

## What this package does not do

It does not measure anything by itself: there is no command to run, no
network requests are made, and no latency, jitter or throughput figures are
collected or reported. It supplies only the parsing, formatting and exit
helpers described above, for use by a program that does the measuring.