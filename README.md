# sigtalk

A tiny messaging pair for POSIX systems. A server prints its process ID and
waits. A client takes that ID and a message, then sends the message to the
server one bit at a time: `SIGUSR1` carries a 0 bit and `SIGUSR2` carries a 1
bit, most significant bit of each byte first. The server puts the bits back
into bytes and writes each byte to standard output as soon as all eight of
its bits have arrived.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal:

```
sigtalk-server
```

It prints a line like:

```
server PID: 12345
```

and then waits for signals until it is interrupted with Ctrl-C, after which
it exits with status 0.

Send it a message from another terminal:

```
sigtalk-client 12345 "hello there"
```

The message is sent as the bytes of the command-line argument, and the client
sleeps 100 microseconds after each bit so that the server can keep up. The
client exits with status 0 on success and status 1 in these cases, printing a
message to standard error:

- wrong number of arguments: `Usage: client [server PID] [message]`
- the PID is empty, contains anything but decimal digits, or is not greater
  than zero: `Error: invalid PID`
- a signal cannot be delivered, for example because no process has that PID:
  `Error: failed to send signal`

## Library use

The bit encoding can be used on its own:

```python
from sigtalk.codec import BitDecoder, decode_bits, encode_bits

bits = list(encode_bits(b"hi"))
assert decode_bits(bits) == b"hi"

decoder = BitDecoder()
for bit in bits[:8]:
    byte = decoder.feed(bit)
assert byte == ord("h")
```

`encode_bits` accepts bytes or text (text is encoded as UTF-8).
`decode_bits` drops a trailing partial byte. `BitDecoder.feed` raises
`ValueError` for anything other than 0 or 1, and `BitDecoder.reset` discards
a byte in progress.

In `sigtalk.client`:

- `parse_pid(text)` returns the PID, or raises `ValueError` for the same
  inputs the command rejects.
- `send_message(pid, message, delay=0.0001)` signals every bit of `message`
  (text or bytes) to `pid`, raising `SendError` (a subclass of `OSError`) if
  a signal cannot be sent.
- `main(argv=None)` runs the command and returns its exit status.

In `sigtalk.server`, `Server(output=None)` decodes signals into bytes written
to a binary stream (standard output by default). `Server.handle_signal`
takes one signal as one bit, `Server.install` registers it for `SIGUSR1` and
`SIGUSR2`, and `Server.run` installs the handlers, writes the PID line and
waits forever.

The package also holds small helper modules:

- `sigtalk.chars`: ASCII classification (`isalpha`, `isdigit`, `isspace`, ...)
  and `toupper` / `tolower`, for one-character strings or integer codes.
- `sigtalk.numbers`: `atoi`, `itoa` and `unsigned_abs` with 32-bit integer
  behaviour.
- `sigtalk.strings`: NUL-terminated text measurement, search and comparison
  (`strlen`, `strchr`, `strcmp`, `strnstr`, `strall`, ...) and bounded copies
  `strlcpy` / `strlcat`, which return the new text and the full length.
- `sigtalk.textops`: `strdup`, `substr`, `strjoin`, `strtrim`, `strltrim`,
  `strmapi`, `striteri` and `split`.
- `sigtalk.memory`: `bytearray` operations `memset`, `memcpy`, `memmove`,
  `memchr`, `memcmp`, `bzero` and `calloc`, raising `ValueError` instead of
  reading past a buffer.
- `sigtalk.linkedlist`: `Node` and `LinkedList`, a singly linked list with
  `add_front`, `add_back`, `last`, `clear`, `foreach`, `map`, `len()` and
  iteration.
- `sigtalk.formatting`: `format_message`, `printf` and `dprintf` supporting
  `%c %s %p %d %i %u %x %X %%`, plus `format_number`, `format_address`,
  `put_char`, `put_str`, `put_endl` and `put_nbr` for text streams.

## Limitations

- POSIX only: it relies on `SIGUSR1`, `SIGUSR2` and `signal.pause`.
- The server sends no acknowledgement; delivery depends on the client's delay
  between bits, and messages from several clients at once get mixed together.
- There is no message framing: the server writes bytes as they complete and
  never marks where one message ends.

## Running the tests

```
pip install ".[test]"
pytest
```