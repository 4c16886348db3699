# cdrills

A collection of small console programs and the library functions behind
them: finding primes in a range, replacing vowels, reversing words, a toy
RSA key generator, PIN request field checks, a threaded ticker, a callback
demo and a two-party socket chat. Only the standard library is used.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### Primes in a range

```
cdrills-primes [algo_type]
```

Reads two whole numbers `a` and `b` from standard input and prints the
primes found, followed by their sum. `algo_type` chooses the method:

- `0` – trial division up to the square root; lists the primes from `a` to
  `b`, inclusive.
- `1` – the sieve of Eratosthenes (the default); lists every prime from 2
  up to `b`, whatever `a` is.

Only the first character of `algo_type` is looked at. An unknown value
falls back to the sieve; more than one argument, or input that is not two
numbers, makes the command exit with status 1.

From Python, `cdrills.prime_range` offers `is_prime(num)`, `sieve(limit)`
(the primes below `limit`), `choose_algorithm(prog, args)`, the `Algorithm`
enum (`SQRT`, `SIEVE`) and the `PrimeRange` dataclass. `PrimeRange(a, b,
algorithm)` has `find_primes()`, a `total` property with the sum, `info()`
and `report()`, which returns the printed listing as a string.

### Replace vowels

```
cdrills-vowels
```

Reads a line, then a single character, and prints the line with every
vowel (`aeiou`, either case) replaced by that character. From Python:
`cdrills.vowels.replace_vowels(text, ch)`, `is_vowel(ch)` and
`read_line(stream)`.

### Reverse words

```
cdrills-words
```

Reads a line and prints it with the letters of each word reversed, keeping
the words in place. Words are separated by spaces and newlines. From
Python: `cdrills.words.reverse_words(text)`.

### Toy RSA

```
cdrills-rsa [p q limit]
```

With three arguments, uses `p` and `q` as the primes and sieves the primes
below `limit` for choosing `e`. Otherwise it sieves the primes below 255
and picks `p` and `q` at random from that list. It prints `n`, `phi(n)`,
`e` (the first listed prime coprime to `phi(n)`) and `d`, the inverse of
`e` modulo `phi(n)`. When no key can be made it reports the error and
exits with status 1.

The building blocks live in `cdrills.modular` (`gcd`, `is_prime`,
`sieve_of_eratosthenes`, `modular_exponent`, `right_to_left`,
`modular_inverse`) and `cdrills.rsa` (`RsaKey`, `pick_e`, `rsa_keygen`,
`rsa_encrypt`, `rsa_decrypt`). `sieve_of_eratosthenes`, `modular_inverse`
and `pick_e` raise `ValueError` when there is no answer. These are for
learning only; the numbers are far too small to protect anything.

### Ticker

```
cdrills-ticker
```

Asks for a whole number of seconds, then a background thread prints a
rising counter once a second until that time has passed. From Python,
`cdrills.ticker.count_until(seconds, out, interval)` does the same and
returns how many values were printed; the `Ticker` class has `run()` and
`stop()`.

### Callback

```
cdrills-callback
```

Calls `show_value` through `invoke` and prints `Value of a is 10`.

### Chat

A one-to-one chat over TCP on port 8080. Start the host first, then the
node, in two terminals.

```
cdrills-chat-host
cdrills-chat-node
```

The host listens on all interfaces and the node connects to `127.0.0.1`.
They take turns: the node sends a line, the host shows it and answers with
a line of its own. The host ends the chat by sending a line that starts
with `Bye`; either side also stops when its input ends.

The threaded variant reads and writes at the same time and takes optional
arguments:

```
cdrills-chat-host-threaded [portno [connections]]
cdrills-chat-node-threaded [hostname|hostaddress [portno]]
```

Missing values fall back to port 8080, one pending connection and the host
`localhost`. Again the host ends the chat with a line starting with `Bye`.

Each message travels as a 256-byte block, so a line may hold at most 255
bytes of UTF-8; a longer one raises `ValueError`. Network failures raise
`cdrills.chat_common.ChatError`.

The classes `ChatServer`, `ChatClient` (in `cdrills.chat_basic`) and
`ThreadedChatServer`, `ThreadedChatClient` (in `cdrills.chat_threaded`) can
also be driven directly: `listen(host)` returns the bound port (pass port 0
for a free one), then `serve(lines, out)` or `connect(host)` and
`converse(lines, out)` take any iterable of lines and an output stream. All
of them work as context managers. `parse_host_args` and `parse_node_args`
read the threaded commands' arguments.

### PIN request fields

`cdrills.za` has no command of its own. It validates the fields of a PIN
generation request: `parse_pin_format` (`0`, `1` or `7`, blank meaning
`7`), `block_size` (32, 48 or 64), `pin_length_range`, `parse_pin_length`
and `parse_pin_salt` (16 characters or empty). The `read_pin_format`,
`read_pin_length` and `read_pin_salt` functions prompt up to three times
before raising `ZaError`, whose `code` attribute holds an exit status;
`ZaRequest` holds a validated set of fields.

## What this package does not do

- `cdrills.za` only checks request fields. It does not generate a PIN,
  does not encrypt anything under a local master key and does not send a
  request anywhere.
- The chat servers serve a single client and then exit; there are no
  rooms, accounts or stored history.