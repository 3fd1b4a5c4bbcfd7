# npdversion

Reports the version string of the node problem detector.

## Installation

    pip install npdversion

## Usage

```python
from npdversion.version import version, print_version

print(version())   # "UNKNOWN"
print_version()    # writes the same string to standard output
```

`version()` returns the version string. `print_version()` prints it to
standard output, followed by a newline. The version string held in
`npdversion.version` is `UNKNOWN`.

## What this package does not do

It only reports a version string. It does not watch a node, detect
problems or export metrics, and it installs no command-line program;
call the functions above from your own code.