# algclab

Small algorithms and data structures, written to study how they work and
how much work they do.

- **Calendar types** (`algclab.date`, `algclab.clocktime`, `algclab.moment`,
  `algclab.interval`): `Date` with the `DateFormat` layouts `YMD`, `DMY` and
  `MDY`; `TimeOfDay`, a time on a 24-hour clock held as seconds since
  midnight; `Moment`, a date plus a time of day; and `TimeInterval`, a
  half-open span `[start, end[` between two moments with a text `label`.
- **Containers** (`algclab.sortedlist`, `algclab.bstree`): `SortedList`, a
  sequence kept in strictly increasing order with a movable cursor, and
  `BSTree`, an unbalanced binary search tree with in-order indexing. Both
  order items with a comparison function returning a negative number,
  zero or a positive number, and neither stores two items that compare
  equal.
- **Schedules** (`algclab.scheduling`): `ArraySchedule`, `ListSchedule` and
  `TreeSchedule` hold time intervals that do not overlap. The first has a
  fixed capacity and keeps intervals in the order they were added; the
  other two are unbounded and keep them in chronological order, backed by a
  `SortedList` and a `BSTree`.
- **Exercises** (`algclab.recurrences`, `algclab.complexity`,
  `algclab.basics`): the recurrence P(n) = 3 P(n-1) + 2 P(n-2) computed four
  ways, functions that return a result together with the number of
  operations it took, Motzkin numbers, and a few introductory programs.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Using the library

```python
from algclab.date import Date, DateFormat, is_leap_year
from algclab.clocktime import TimeOfDay
from algclab.moment import Moment
from algclab.interval import TimeInterval
from algclab.scheduling import TreeSchedule

is_leap_year(2020)                              # True
Date(2019, 12, 25).format(DateFormat.DMY)       # '25/12/2019'
Date.parse("1111-2-3").format()                 # '1111-02-03'
Date(2019, 12, 31).increment()                  # Date(year=2020, month=1, day=1)

t = TimeOfDay.parse("2:30:40") + TimeOfDay.parse("23:30:00")
t.format()                                      # '02:00:40' (wraps at midnight)
TimeOfDay.parse("12:30").format()               # '12:30:00'

start = Moment.create(2019, 12, 31, 9, 0, 0)
end = Moment.parse("2019-12-31 12:00:00")
start.format()                                  # '2019-12-31 09:00:00'
```

Invalid values raise `ValueError`: building a date or time out of range,
parsing text that does not match, or incrementing past 9999-12-31. A
`Moment.parse` whose time part is missing or unreadable gives midnight.

`SortedList` and `BSTree` take any comparison function:

```python
from algclab.bstree import BSTree

tree = BSTree(lambda a, b: (a > b) - (a < b), str)
for n in (8, 4, 9, 3, 1, 10):
    tree.add(n)
list(tree)          # [1, 3, 4, 8, 9, 10]
tree.kth_item(2)    # 4
5 in tree           # False
print(tree.view())  # the tree drawn sideways
```

A schedule refuses an interval that overlaps one it already holds; `add`
returns whether the interval was stored:

```python
schedule = TreeSchedule()
trip = TimeInterval(start, end, "shopping")
schedule.add(trip)          # True
schedule.add(trip)          # False
schedule.get(0)             # earliest interval
schedule.pop(0)
```

## Command-line programs

Three commands print the tables that the exercises produce:

```
algclab-basics arrays         # month lengths and their running totals
algclab-basics sqrt [ROWS]    # numbers with square roots and squares
algclab-basics hello          # asks for a name and greets it
algclab-basics armstrong      # three-digit Armstrong numbers

algclab-complexity f [N]      # results and iteration counts of f1..f4
algclab-complexity changes    # value changes in fixed arrays
algclab-complexity beating    # element greater than the most earlier ones
algclab-complexity consecutive
algclab-complexity dedup      # duplicate removal with comparison and shift counts
algclab-complexity t          # T1, T2, T3 and their recursive calls, n = 0..200
algclab-complexity motzkin    # Motzkin numbers, recursive and tabulated

algclab-recurrences [N]       # P(N) four ways with processor time (N defaults to 35)
```

When `ROWS` or `N` is left out of `sqrt` or `f`, the program asks for it on
standard input. The recursive method of `algclab-recurrences` takes
exponential time, so large values of `N` are slow.