# dbstats

Render the metrics that a database server reports, for the command line.

The `dbstats.metrics` module turns a list of metrics into text in two ways:

- **list**: the key and description of each metric, as JSON or as a
  right-aligned text table;
- **show**: the current value of each metric, as JSON. A metric holds either
  a single number or an array of elements. Each element carries attributes
  (such as `table_name` and `index_name`) and a value.

## Installation

```
pip install dbstats
```

## Describing metrics

A metric is a `MetricsItem(key, description, value=0.0, array=None)`. A scalar
metric sets `value`. An array metric sets `array` to a sequence of
`MetricsElement(value, attributes)` objects. `MetricsItem.is_array()` tells the
two kinds apart.

```python
from dbstats.metrics import MetricsElement, MetricsItem, format_list, format_show

items = [
    MetricsItem("session_count", "number of active sessions", 100),
    MetricsItem(
        "index_size",
        "estimated each index size",
        array=[
            MetricsElement(65536, {"table_name": "A", "index_name": "IA1"}),
            MetricsElement(256, {"table_name": "B", "index_name": "IB1"}),
        ],
    ),
]

print(format_list(items, "text"), end="")
print(format_show(items, "json"), end="")
```

The `format_show` call prints:

```
{
  "session_count": 100,
  "index_size": [
    {
      "table_name": "A",
      "index_name": "IA1",
      "value": 65536
    },
    {
      "table_name": "B",
      "index_name": "IB1",
      "value": 256
    }
  ]
}
```

## Formats

`format_list(items, output_format)` accepts these formats:

- `json`: writes one `"key": "description"` pair per line.
- `text`: writes `key : description` lines. The keys are right-aligned and the
  descriptions are padded to the longest one. An item whose key repeats the
  key of the item just before it is skipped.

`format_show(items, output_format)` accepts only `json`. It writes values as
follows:

- A scalar is printed with six decimals if it has a fractional part, and as a
  whole number otherwise.
- An array element's value is printed as a whole number if it is greater
  than 1, and with six decimals otherwise.

Both functions raise `UnsupportedFormatError` for a format they do not accept.
`format_show` gives the message "human readable format has not been
supported" when asked for `text`.

Keys, descriptions and attributes are written as they are, without JSON
escaping.

## Running a whole command

`run_list(fetch, output_format, out=None, err=None, monitor=None)` and
`run_show(...)` do the complete job of a command. They fetch the metrics,
write the formatted text to `out` (standard output by default), and write
problems to `err` (standard error by default). Each returns a `ReturnCode`,
either `OK` (0) or `ERR` (1).

- `fetch` is a callable that takes no arguments and returns the metric items.
  It returns `None` when no valid response was received. It raises
  `ConnectionFailedError(database_name)` when the database cannot be reached.
- `monitor` is optional. If given, its `start()` is called first. Its
  `finish(True)` is called on success and `finish(False)` on failure.

An unsupported format, a `None` response, or a `ConnectionFailedError` causes
the run to print a message to `err` and return `ReturnCode.ERR`.

```python
import sys
from dbstats.metrics import ReturnCode, run_show

code = run_show(lambda: items, "json", sys.stdout, sys.stderr)
assert code is ReturnCode.OK
```

All errors derive from `MetricsError`.

## What this package does not do

- It does not talk to a database server. You supply the `fetch` callable that
  obtains the metrics.
- It installs no command-line program. `run_list` and `run_show` are meant to
  be called from your own command.
- It has no human-readable text form for metric values. `show` produces JSON
  only.