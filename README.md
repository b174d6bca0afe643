# minitalk

A server and client pair that pass a message between two processes using
only two POSIX signals. Each byte is sent as eight signals, least
significant bit first: `SIGUSR1` stands for a 1 bit and `SIGUSR2` for a 0
bit. The server answers every bit with `SIGUSR1`, and the client waits for
that acknowledgement before it sends the next bit. A message ends with a
zero byte; the server writes that byte and then a newline.

The server waits for signals with `signal.sigwaitinfo`, and both ends use
`signal.pthread_sigmask`, so the programs run on POSIX systems that provide
them, such as Linux.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits
for signals until it is interrupted with Ctrl-C:

```
minitalk-server
Server PID: 4242
```

In another terminal, send a message to that process id:

```
minitalk-client 4242 "hello there"
```

The server writes `hello there`, the ending zero byte, and a newline to
standard output.

The client takes exactly two arguments. With any other number it prints
`Error: Wrong arguments` and exits with status 1. The process id is read
with `minitalk.strutil.atoi`, so leading whitespace and a sign are accepted
and parsing stops at the first non-digit; if the result is not positive the
client exits with status 1 without printing anything. The message argument
is sent as its file-system bytes.

## Library use

`minitalk.protocol` holds the bit encoding:

- `encode_byte(value)` returns the eight bits of a byte (0 to 255), least
  significant first; other values raise `ValueError`.
- `encode_message(data)` yields the bits of a `str` (encoded as UTF-8) or
  `bytes`, followed by those of a terminating zero byte.
- `BitDecoder` collects bits through `feed(bit)` and returns the finished
  byte after every eighth bit, `None` otherwise. `reset()` drops a partly
  built byte.

`minitalk.server.Server(output=None, acknowledge=os.kill)` writes finished
bytes to a binary stream (standard output by default). `handle(signum,
sender_pid)` takes one bit and acknowledges it; `serve_forever()` prints the
process id and handles signals in a loop.

`minitalk.client.Client(pid, kill=os.kill, wait_for_ack=None)` sends to a
positive process id (anything else raises `ValueError`). `send_byte(value)`
sends one byte; `send_message(message)` sends a message and its terminating
zero byte. Without `wait_for_ack`, the client blocks `SIGUSR1` while sending
and waits for it after each bit.

`minitalk.printf` offers `render(fmt, *args)`, which returns the formatted
text, and `printf(fmt, *args, file=None)`, which writes it and returns the
character count. The conversions are `%c %s %d %i %u %x %X %p %%`. A few
details of this format language:

- `%s` of `None` gives `(null)`; `%p` of `None` or 0 gives `(nil)`.
- `%X` of 0 gives nothing at all.
- An unknown conversion character is written as itself but not counted.
- `FormatError` (a `ValueError`) is raised for a `None` format, a format
  ending in a lone `%`, a missing argument, or a `%c` string that is not a
  single character.

`minitalk.strutil` holds string helpers with the behaviour of the classic C
routines: `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strnstr` (returns
an index or `None`), `strncmp`, `strjoin`, and `strlcat`, which returns a
`Concatenation` of the resulting text and the length it tried to build.

## What it does not do

The server keeps one decoding state for all senders, so messages from
several clients at once get mixed together. There is no encryption, no
checking of the received bytes, and no timeout: a client whose
acknowledgement never arrives waits for ever.

## Running the tests

```
pip install ".[test]"
pytest
```