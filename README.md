# datespan

`datespan` measures the time between two calendar dates as whole years,
months and days. It counts days first. When it has to, it borrows from the
month before the later date, which gives the same result as counting on a
calendar by hand.

The package also includes a small Mandelbrot set renderer for the terminal.

## Installation

```
pip install .
```

## Date arithmetic

Everything is in `datespan.dates`:

```python
from datespan.dates import (
    parse_date, date_difference, current_date,
    is_leap_year, days_in_month, is_valid_date,
)

start = parse_date("1990-05-15")
end = parse_date("2024-03-10")
diff = date_difference(start, end)

print(diff)                # 33 years, 9 months, 24 days
diff.years, diff.months, diff.days   # (33, 9, 24)
diff.total_months()        # 405
diff.approx_days()         # 12339  (years*365 + months*30 + days)
diff.approx_weeks()        # 1762   (approx_days() // 7)

date_difference(start, current_date())   # time from a past date up to today

is_leap_year(2000)         # True
days_in_month(2023, 2)     # 28
days_in_month(2023, 13)    # 0 for a month outside 1-12
is_valid_date(2023, 2, 29) # False
```

- `parse_date(text)` accepts only the strict form `YYYY-MM-DD`, with years
  from 1 to 9999. It returns a `datetime.date` and raises `ValueError` for
  anything else.
- `date_difference(start, end)` gives the same result whichever date comes
  first. It always counts from the earlier date, and it returns a frozen
  `DateDifference`.
- `current_date()` is today's date in local time.

## The Mandelbrot renderer

```
datespan-mandelbrot
```

This prints a 100×100 view of the whole set inside a `+`/`-`/`|` frame. Each
point is drawn with a character chosen by the number of iterations it takes to
escape, up to 16. Options:

| Option        | Default |
|---------------|---------|
| `--width`     | 100     |
| `--height`    | 100     |
| `--max-count` | 16      |
| `--left`      | -2.0    |
| `--top`       | 1.25    |
| `--xside`     | 2.5     |
| `--yside`     | -2.5    |

A width or height below 1 is rejected with a usage error.

The same pieces are available from Python:

```python
from datespan.mandelbrot import escape_count, mandelbrot_grid, render

escape_count(0.0, 0.0)     # 16: the origin never escapes
grid = mandelbrot_grid(40, 20, 16, -2.0, 1.25, 2.5, -2.5)
print(render(grid))
```

## What is not included

The package has no command-line or interactive front end for the date
calculations: there is no menu, age calculator prompt or date checker to run
from the shell. Use the functions in `datespan.dates` from your own code.