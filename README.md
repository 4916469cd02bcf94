# pipeflow

`pipeflow` sends a file through a chain of commands and writes the result to
another file. It does the same job as this shell line:

```sh
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

It also has a here-document mode. In that mode it appends to the output
file instead of truncating it:

```sh
cmd1 << LIMITER | cmd2 | ... | cmdN >> outfile
```

## Installation

```sh
pip install .
```

## Command line

```sh
pipeflow infile "cmd1" "cmd2" ... "cmdN" outfile
```

`python -m pipeflow.cli` runs the same command.

- Four arguments are needed at the least: an input file, two commands and an
  output file. With fewer, the program prints `Too few arguments` and exits
  with status 1.
- The output file is created if it does not exist. If it exists, it is
  truncated. If it cannot be opened, the program prints
  `outfile : <reason>` and exits with status 1.
- If the input file is missing, the program prints `infile : <reason>` on
  standard error. The first command then gets a single NUL byte as its input.
- If the input file exists but cannot be opened, the reason is printed. The
  output file is still truncated, no command runs, and the exit status is 0.
- If a command argument, or the output file name, is empty or made only of
  whitespace, the program prints `Error: wrong argument` and the exit status
  is 1.
- Each command is split on spaces. The string is used as it stands if it
  names an executable file. If not, its first word is looked up in the
  directories of the `PATH` variable.
- An intermediate command that cannot be found or started is reported on
  standard error. The next command then gets empty input.
- If the last command cannot be found, or if `PATH` is not set, the program
  prints `Command not found` and exits with status 1.
- If the last command runs, its exit status becomes the exit status of the
  program. When the command is killed by signal N, the status is 128 + N.

### Here-document mode

```sh
pipeflow here_doc LIMITER "cmd1" "cmd2" ... "cmdN" outfile
```

Lines are read from standard input until a line equals `LIMITER`. The limiter
line itself is not passed on. The lines read are sent through the commands,
and the result is appended to the output file.

- This mode needs at least five arguments.
- The limiter must not be blank.
- If standard input ends before the limiter appears, the program prints
  `Error occurred while providing input` and exits with status 1.

## Library use

```python
from pipeflow.cli import run_pipeline, pipex, here_doc, read_here_doc
from pipeflow.command import resolve_command, find_executable, get_env
from pipeflow.files import read_input, open_input, open_output, OutputMode, check_commands, is_blank
from pipeflow.textutil import split_words

split_words("ls  -la ", " ")          # ['ls', '-la']
get_env({"PATH": "/bin"}, "PATH")     # '/bin'
is_blank(" \t")                       # True
```

`run_pipeline(data, commands, output, env)` takes these arguments:

- input bytes
- a sequence of command strings
- an open binary output file
- an environment mapping

It runs the commands one after another and returns the exit status of the
last one.

`pipex(argv, env)` does the same work as the command line, and so does
`here_doc(argv, env, stream)`, which reads from `stream` (standard input by
default). In both, `argv` leaves out the program name. Both return the exit
status.

`resolve_command(command, env)` returns the executable path and the argument
list for a command string.

`pipeflow.textutil` has these string helpers: `split_words`, `atoi`, `itoa`,
`strtrim`, `substr`, `strnstr` and `strncmp`.

Errors are raised as subclasses of `pipeflow.command.PipexError`:

- `TooFewArguments`
- `CommandNotFound`
- `MissingEnvironment`, a kind of `CommandNotFound`
- `pipeflow.files.InvalidArgument`, raised for blank arguments

## Limitations

Commands are split on single spaces only. There is no quoting, no escaping,
no variable expansion and no globbing. An argument cannot contain a space.
Intermediate commands run one after another, not at the same time. Each
one's whole output is held in memory before it is passed on.

## Tests

```sh
pip install .[test]
pytest
```