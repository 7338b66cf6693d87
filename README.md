# cursed-diner

A small simulation of a restaurant whose guests sit around one circular
table. Guests with positive energy are sorcerers, guests with negative
energy are cursed spirits. When the table is full, newcomers wait in a
queue; a history of seatings decides who leaves first.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running a command file

```
cursed-diner commands.txt
```

Without a path, `test.txt` in the current directory is read. If the file
cannot be opened, a message goes to standard error and the exit status is 1.

The file is read as whitespace-separated tokens. Each command prints its
results, one `name-energy` per line, to standard output.

| Command | Effect |
| --- | --- |
| `MAXSIZE <n>` | Set how many guests the table, and separately the queue, may hold. |
| `RED <name> <energy>` | A guest arrives. Zero energy and names already at the table or in the queue are turned away; otherwise the guest is seated, queued when the table is full, or turned away when the queue is full too. |
| `BLUE <num>` | The `num` longest-seated guests leave; queued guests then take free seats in order. |
| `PURPLE` | Sort the queue, up to the last guest with the largest absolute energy, by absolute energy (largest first) with a shellsort; then the `BLUE` of the swap count modulo `MAXSIZE` follows. |
| `REVERSAL` | Reverse the order of the sorcerers and, separately, of the spirits around the table. |
| `UNLIMITED_VOID` | Print the run of at least four neighbouring guests with the smallest energy sum, starting from its weakest member. Prints nothing for fewer than four guests. |
| `DOMAIN_EXPANSION` | Whichever side has the smaller total energy is thrown out of the queue and the table; those removed are printed, queue first, each newest first. Queued guests then take free seats. |
| `LIGHT <num>` | Print the table clockwise from the current seat (non-zero `num`) or the queue (`num` of 0). |

Any word that is not one of the commands above is treated as `LIGHT`.
A number argument is read from the start of its token; a token that does
not begin with an integer raises `ValueError`.

Example file:

```
MAXSIZE 4
RED Gojo 10
RED Sukuna -12
RED Yuji 7
LIGHT 1
DOMAIN_EXPANSION
LIGHT 0
```

## Using it from Python

```python
import sys

from cursed_diner.restaurant import Restaurant
from cursed_diner.simulate import run, simulate

diner = Restaurant(4, sys.stdout)
diner.red("Gojo", 10)
diner.red("Sukuna", -12)
diner.light(1)

run("RED Yuji 7 LIGHT 1".split(), diner)
simulate("commands.txt", Restaurant(8, sys.stdout))
```

`Restaurant(maxsize, out)` writes its output to `out`, or to standard
output when `out` is `None`. Its `table`, `queue` and `history` attributes
hold the current state.

The building blocks are available on their own as well:
`cursed_diner.containers` holds the circular table (`CircularTable`), the
queue (`CustomerQueue`) and `Customer`; `cursed_diner.shellsort` holds a
gap-halving `shellsort` and `insertion_sort_gap` with a caller-supplied
ordering; `cursed_diner.rituals` holds the pure helpers behind
`UNLIMITED_VOID` (`void_segment`), `REVERSAL` (`reverse_same_sign`) and the
stable fix-up of `PURPLE` (`stable_fix`).

## What it does not do

The package only replays command files or calls made from Python. It has
no interactive prompt, and it keeps no state between runs: each run starts
with an empty table, queue and history.