# fhashkit

Compute MD5, SHA1, SHA256 and CRC32 checksums of one or more files in a
single pass over each file. Everything is written in pure Python with no
third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
fhash file1 [file2 ...]
```

The tool first prints a banner with its version. Then, for every file, it
prints:

- the path;
- `File Size: <n> Byte(s) (<short>)`, where the short form is something like
  `1.50 KB` (it is empty for files of 1 KB or less);
- `Modified Date: YYYY-MM-DD HH:MM` in local time;
- a progress bar of up to 40 `#` characters;
- the `MD5`, `SHA1`, `SHA256` and `CRC32` checksums in lower case.

A file that cannot be read gets a single error line instead:
`File is missing.`, `Cannot open a directory.` or `Cannot open this file.`.

The run ends with `Finished in <seconds>s`, followed by the throughput in
KB/s or MB/s when it is above 1 KB/s. Run without arguments, the tool prints
a usage line and exits.

## Library

### Hash algorithms

```python
from fhashkit.md5 import MD5
from fhashkit.sha1 import SHA1, ReportType
from fhashkit.sha256 import SHA256
from fhashkit.crc32 import CRC32, crc32

MD5(b"abc").hexdigest()      # upper-case hex
SHA1(b"abc").hexdigest()
SHA256(b"abc").hexdigest()
CRC32(b"abc").hexdigest()    # eight upper-case hex digits
crc32(b"abc")                # integer value
```

Each hasher takes more data through `update()`. `digest()` and `hexdigest()`
do not end the computation; more data may be added afterwards.

- `MD5(data, seed=0)`: a non-zero `seed` shifts the four initial constants;
  the default of 0 gives standard MD5.
- `SHA1` also has `reset()`, `hash_file(path)` (feeds a whole file, raising
  `OSError` if it cannot be read) and `report(report_type)`, which renders the
  digest as upper-case hex (`ReportType.HEX`) or as the decimal values of its
  bytes run together (`ReportType.DIGIT`).
- `CRC32.value()` returns the checksum as an unsigned 32-bit integer.

### Hashing a batch of files

`fhashkit.engine` drives all four hashers over a list of files:

```python
from fhashkit.engine import HashJob, UIBridge, hash_files

job = HashJob(bridge=UIBridge(), paths=["a.bin", "b.bin"])
for result in hash_files(job):
    print(result.path, result.state.name, result.md5, result.error)
```

- `HashJob` holds the paths, the bridge, `uppercase`, a `stop` event (set it
  from another thread to stop the job), the read `chunk_size` (1 MiB by
  default), a `pause` in seconds taken before each file (0.05 by default),
  and, once run, `total_size` and `results`.
- `hash_files(job)` returns a list of `ResultData` records with `path`,
  `state` (a `ResultState`: `NONE`, `PATH`, `META`, `ALL` or `ERROR`),
  `size`, `mdate`, `md5`, `sha1`, `sha256`, `crc32` (upper-case hex) and
  `error`.
- `UIBridge` receives the callbacks (`show_file_name`, `show_file_meta`,
  `show_file_hash`, `show_file_err`, `update_prog`, `update_prog_whole`,
  `file_calc_finish`, `file_finish`, and so on). The base class does nothing
  visible but records `preparing`, `stopped`, `finished` and
  `whole_progress`; subclass it to display progress. `get_prog_max()` sets
  the full-scale value of the progress bars (100 by default).
- `open_for_read(path)` opens a regular file for binary reading and raises
  `FileOpenError` (a subclass of `OSError`) with the messages shown above.

`fhashkit.cli.ConsoleBridge(stream)` is the bridge the command-line tool
uses; `fhashkit.cli.format_summary(total_size, duration_ms)` builds its
closing line.

### Helpers

`fhashkit.utils` provides `current_millis()` and
`short_size_str(size, conv_1k_smaller=False)`, for example
`short_size_str(1536)` returns `"1.50 KB"`.

`fhashkit.strhelper` provides `trim`, `trim_left`, `trim_right`,
`replace_all`, `fix_newline` (normalises line endings to CR LF), ASCII-only
`to_upper` and `to_lower`, `find_ci` (case-insensitive search, -1 when not
found), `int_to_str(num, base)` (bases 2 to 16), `starts_with`, `ends_with`
and `decode_json_escapes`.

## What it does not do

- There is no graphical interface and no file-manager integration; the only
  front end is the `fhash` command.
- Executable version information is not read: `ResultData.version` is always
  empty.
- Results are printed, not saved; there is no option to write them to a file
  or to verify files against a list of known checksums.