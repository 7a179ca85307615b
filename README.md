# minish

Building blocks for a small shell on POSIX systems, plus two command-line
tools built from them.

## Modules

- **`minish.environ`**: an environment held as a list of `KEY=VALUE`
  strings. `key_of` and `value_part` split an entry at its first `=`;
  `find_line` returns the index of the first entry whose key starts with the
  given key (or `None`); `value_of` returns that entry's value. `set_value_at`,
  `set_value`, `add_var` and `remove_at` return a new list and leave the one
  they were given untouched. A missing key or an index out of range raises
  `EnvError`.
- **`minish.lexer`**: quote-aware scanning of a command line by position:
  `is_operator` (`<`, `>`, `|`), `is_dollar`, `in_single_quotes`,
  `in_double_quotes`, `in_quotes`, `has_unclosed_quote`, the length helpers
  `dollar_len`, `dquoted_len`, `squoted_len`, `content_len`, and the
  `extract_content`, `extract_squoted`, `extract_dquoted`, `extract_dollar`
  and `extract_dollar_name` helpers, each returning the text read and the
  position just after it. `extract_squoted` raises `ValueError` when the
  closing quote is missing.
- **`minish.linereader`**: `LineReader(fd, buffer_size=1024)` reads
  newline-terminated lines from a raw file descriptor; `read_line` returns
  `None` at end of input, and the reader can be iterated. `get_next_line(fd)`
  keeps one reader per descriptor between calls and returns `None` at the end
  of input, on a read error, or for a descriptor outside `0..256`.
- **`minish.pipex`**: `run_pipeline(infile, commands, outfile, env,
  append=False)` feeds a file through a chain of commands into another file
  and returns the last command's exit status. Commands are split on spaces
  and looked up on the `PATH` of `env` (`resolve_command`). Also
  `env_value`, `open_infile`, `open_outfile` and `read_here_doc`; file
  errors raise `PipexError`.
- **`minish.printf`**: `format_string(fmt, *args)` and `printf(fmt, *args)`
  support `%c %s %p %d %i %u %x %X %%`, with no flags, widths or precisions.
  `printf` writes to standard output and returns the number of characters.
- **`minish.minitalk`**: `encode_message` turns a message into bits (a
  64-bit length, then each byte, most significant bit first);
  `MessageDecoder.feed` rebuilds messages one bit at a time;
  `send_message(pid, message, delay=0.0003)` delivers the bits with
  `SIGUSR1` (0) and `SIGUSR2` (1); `parse_int` reads a leading integer the
  way `atoi` does.

## Installation

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Commands

### `minish-pipex`

Behaves like `< infile cmd1 | cmd2 | ... > outfile`:

```
minish-pipex infile "grep foo" "wc -l" outfile
```

With `here_doc` as the first argument, standard input is read until a line
starting with the limiter and stored in a file named after the limiter in
the current directory; that file is used as input, the output file is
appended to instead of truncated, and the file is removed afterwards:

```
minish-pipex here_doc END "cat" "wc -l" outfile
```

At least four arguments are required. The exit status is that of the last
command, or 255 when the arguments are wrong or a file cannot be opened.

### `minish-server` and `minish-client`

Start the server; it prints its process id and then waits for messages:

```
minish-server
```

From another terminal, send it a message:

```
minish-client 12345 "hello there"
```

The server prints each complete message and answers with `SIGUSR1`; the
client then prints `Message reçu par le serveur` and exits. An unreachable
process id makes the client report the error and exit with status 1.

## Library use

```python
from minish import environ, lexer
from minish.printf import format_string

env = ["HOME=/home/user", "PATH=/usr/bin:/bin", "SHLVL=1"]
environ.value_of(env, "HOME")          # "/home/user"
env = environ.set_value(env, "SHLVL", "2")

lexer.has_unclosed_quote("echo 'abc")  # True

format_string("%d items, mask %x", 42, 255)  # "42 items, mask ff"
```

## What this package does not do

There is no interactive shell here: no prompt, no line editing or history,
no builtins such as `cd`, `export` or `unset`, and nothing that turns the
lexer's pieces into a token list and runs it. The lexer and environment
modules are the parts such a shell would be built on; running commands is
available only through `minish-pipex` and `run_pipeline`.