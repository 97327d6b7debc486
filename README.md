# minitalk

A tiny messaging pair for POSIX systems. A server process waits for signals.
A client sends it a message one bit at a time, using `SIGUSR1` for a 1 bit
and `SIGUSR2` for a 0 bit. The server answers every signal, so the client
never gets ahead of it.

The server collects its signals with `signal.sigwaitinfo`. That call exists
on Linux and some other Unix systems, but not on macOS or Windows.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Start the server in one terminal:

```
minitalk-server
```

It prints its process id and then waits:

```
Server PID: 4242
Server is ready and waiting for signals...
```

Send a message from another terminal:

```
minitalk-client 4242 "Hello there"
```

The client prints its own PID and then signals the message. The message is
the argument's bytes as the file system encoding gives them. The server
writes each complete message to standard output as raw bytes, with no newline
added. It exits with status 0 on `SIGINT`.

The client exits with status 1 in these cases:

- it is not given exactly two arguments (it prints a usage line);
- the PID does not parse to a positive number (it prints `Invalid PID.`);
- its signal handlers cannot be installed;
- sending a signal fails, for example because no such process exists.

If the server confirms the message, the client exits with status 0 and prints
nothing more. If every signal went out without that confirmation, it prints
`Signal sent successfully.` and exits with status 0.

## The protocol

`minitalk.protocol` describes what travels over the signals:

1. One `SIGUSR1` for each byte of the message, then one `SIGUSR2` to end the
   length.
2. Each byte as eight signals, least significant bit first (`SIGUSR1` = 1,
   `SIGUSR2` = 0), followed by a zero byte.

The receiver acknowledges each signal with `SIGUSR2` (`Reply.ACK`). When the
first signal after the last message byte arrives, it sends `SIGUSR1`
(`Reply.DONE`) to report the message complete. At that point it also starts
afresh for the next message.

You can use the protocol without real signals:

```python
from minitalk.protocol import Receiver, frame_message

receiver = Receiver()
for signum in frame_message("hi"):
    replies, message = receiver.handle(signum)
    if message is not None:
        print(message)   # b'hi'
        break
```

- `encode_char(byte)` returns the eight signals for one byte.
- `frame_message(message)` returns every signal for a `str` (sent as UTF-8)
  or for `bytes`, with the terminating zero byte included.
- `Receiver.handle(signum)` returns the list of replies to send and the
  finished message, or `None`. `Receiver.reset()` drops a partly received
  message.

The classes that connect the protocol to real signals are these:

- `minitalk.server.Server(output=None)`. `on_signal(signum, sender_pid)`
  answers the sender with `os.kill` and writes finished messages to `output`
  (a binary stream, standard output by default). `install()` blocks
  `SIGUSR1`, `SIGUSR2` and `SIGINT` so that `serve_forever()` can collect
  them.
- `minitalk.client.Client(server_pid, kill=None)`. `send(message)` sends the
  framed message through `kill` (by default `os.kill`) and waits for an
  acknowledgement after each signal. `acknowledge(signum)` should be called
  from the signal handler. `parse_pid(text)` reads a positive process id or
  raises `ValueError`.

## Toolkit

The package also ships small helpers that work on Python values:

| Module | What it holds |
| --- | --- |
| `minitalk.chars` | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower` for ASCII codes or one-character strings |
| `minitalk.memory` | `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`, `memmove`, `memset` on `bytearray`/`memoryview`; `memmove` moves within one buffer by offsets |
| `minitalk.strings` | `strlen`, `strchr`, `strrchr`, `strdup`, `strjoin`, `strlcat`, `strlcpy`, `strncmp`, `strnstr`, `substr`; searches return an index or `None`, and `strlcat`/`strlcpy` return the new string and the full length |
| `minitalk.output` | `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` writing to a text stream |
| `minitalk.convert` | `atoi`, `itoa`, `split`, `strtrim`, `strmapi`, `striteri` |
| `minitalk.linkedlist` | `Node` and `LinkedList` with `push_front`, `push_back`, `last`, `pop_front`, `clear`, `iterate`, `map` |
| `minitalk.printf` | `render(fmt, *args)` and `printf(fmt, *args, stream=None)` with `%c %s %p %d %i %u %x %X %%` and C `int` wrap-around |
| `minitalk.linereader` | `LineReader.next_line(stream)` and `map_length(text)` |

`LineReader` reads map files made of `0`, `1`, `C`, `E`, `P` and newlines. It
drops any chunk read that holds another character, so it is not a
general-purpose line reader.

## What it does not do

- Each client run sends exactly one message. There is no interactive mode.
- The server handles one sender at a time. Signals from two clients at once
  are mixed into the same message.
- Nothing is encrypted or authenticated. Any process allowed to signal the
  server can send to it.