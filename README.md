# cpufeat

`cpufeat` models what an AArch64 processor can do: the feature flags
that Linux lists in `/proc/cpuinfo`, which hardware capability word
(`HWCAP` or `HWCAP2`) reports each of them, and the cache and TLB levels
a CPU exposes. It can print a processor report as aligned plain text or
as compact JSON.

## Installation

```
pip install cpufeat
```

It needs Python 3.10 or newer and has no runtime dependencies.

## Command line

```
list-cpu-features
list-cpu-features --json
list-cpu-features --help
```

| Option          | Meaning                                   |
|-----------------|-------------------------------------------|
| `-j`, `--json`  | Print the report as JSON, not plain text  |
| `-h`, `--help`  | Show the usage message and exit           |

`--help` prints the usage message and exits with status 0. Any other
unknown argument prints the usage message and exits with status 1.

The command reads `/proc/cpuinfo`, taking the first `Features`,
`CPU implementer`, `CPU variant`, `CPU part` and `CPU revision` lines.
Values that are missing or cannot be read as numbers are reported as 0,
and if the file cannot be read the report has no flags and all
numbers 0.

In text mode each entry goes on its own line, with the key padded to
15 columns. Numbers are shown in decimal and in hexadecimal, for
example `implementer     :  65 (0x41)`. Flags are listed sorted,
separated by commas. In JSON mode the same entries are written as one
object with no spaces: `arch`, `implementer`, `variant`, `part`,
`revision` and `flags`.

## Library

### AArch64 features

`cpufeat.aarch64` has `Aarch64Feature`, an integer enumeration of every
known AArch64 feature from `FP` up to `SME_SF8DP2`; its `field_name`
property gives the short name (`SME_I16I64` becomes `smei16i64`). It
also has `Aarch64Info`, a frozen dataclass holding the feature set
together with the `implementer`, `variant`, `part` and `revision` fields.

- `feature_name(feature)` gives a feature's short name, such as
  `"asimd"`, or `"unknown_feature"` for a value outside the enumeration.
- `feature_value(features, feature)` tells whether a feature is in a
  set; unknown values are never present.

### Introspection table

`cpufeat.introspection` pairs each feature with the flag that
`/proc/cpuinfo` uses for it and with the hardware capability word that
carries it. `HwcapWord` is either `HWCAP` or `HWCAP2`. The flag is the
feature's short name, except that `SME_LUTV2` is listed as `smelutv1`.

- `entry(feature)` returns the `IntrospectionEntry` for a feature
  (`feature`, `name`, `cpuinfo_flag`, `hwcap_word`), raising
  `ValueError` for an unknown one.
- `cpuinfo_flag(feature)` returns just the `/proc/cpuinfo` flag.
- `features_from_cpuinfo_flags(flags)` turns a whitespace-separated
  string, or an iterable of words, into the set of features they name.
  Words that name no feature are ignored.

```python
from cpufeat.aarch64 import Aarch64Info
from cpufeat.introspection import features_from_cpuinfo_flags

features = features_from_cpuinfo_flags("fp asimd aes pmull sha1 sha2 crc32")
info = Aarch64Info(features=features, implementer=0x41, part=0xD08)
```

### Cache description

`cpufeat.cache_info` describes caches:

- `CacheType` covers null, data, instruction, unified, TLB, DTLB, STLB
  and prefetch. Its `label()` method gives the lower-case name.
- `CacheLevelInfo` holds one level: its level number, cache type, size
  in bytes, ways, line size, TLB entries and partitioning.
- `CacheInfo` is an ordered collection of levels. It supports `add`,
  `len`, iteration and indexing, and holds at most ten levels
  (`MAX_CACHE_LEVEL`); adding an eleventh raises `OverflowError`.

### Building a report

`cpufeat.listing` turns this data into output:

- `build_aarch64_tree(info)` builds the report tree from an
  `Aarch64Info`.
- `to_text(tree)` and `to_json(tree)` render it, and so does
  `render(tree, output_format)` with an `OutputFormat` (`TEXT` or `JSON`).
- `sorted_flag_names(features)` gives the sorted names of present
  features, `cache_info_entries(cache_info)` gives one mapping per cache
  level, and `json_string(value)` quotes a string, putting a backslash
  before quotes, backslashes, slashes and control characters.
- `parse_arguments(argv)` reads the command-line options and returns an
  `OutputFormat`. It raises `UsageError` on anything else; the error's
  `help_requested` is true for `-h` and `--help`.
- `usage(name)` gives the help text.
- `main(argv=None)` runs the command and returns its exit status.

```python
from cpufeat.listing import OutputFormat, build_aarch64_tree, render

print(render(build_aarch64_tree(info), OutputFormat.JSON))
```

## What it does not do

- It does not query the processor itself: there is no CPUID and no
  reading of the hardware capability words from the auxiliary vector.
  Features come only from the `Features` line of `/proc/cpuinfo`.
- The command always describes the host as AArch64. Other architectures
  such as x86, ARM, MIPS, PowerPC, s390x, RISC-V and LoongArch are not
  covered.
- The command's report has no cache section. `CacheInfo` and
  `cache_info_entries` can describe caches, but nothing in the package
  detects them.
- `HwcapWord` says which word a feature lives in, not its bit position.

## Running the tests

```
pip install -e ".[test]"
pytest
```