# fakesmith

Random fake data for test suites, fixtures and demos. Every generator is a
plain function that returns a fresh value on each call. The package has no
dependencies outside the standard library.

## Installing

```
pip install fakesmith
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "fakesmith[test]"
pytest
```

## Reproducible output

All generators draw from one shared random source in `fakesmith.randomness`.
Seed it to get the same sequence every run. A seed of `0` reseeds from the
current time.

```python
from fakesmith.randomness import seed
from fakesmith.numbers import number

seed(11)
first = number(1, 1000)
seed(11)
assert number(1, 1000) == first
```

## What it makes

### Numbers and booleans: `fakesmith.numbers`

```python
from fakesmith.numbers import number, uint8, int32, float64_range, numerify, shuffle_ints, boolean

number(1, 6)            # an int from 1 to 6, both ends included
uint8()                 # 0..255
int32()                 # a signed 32-bit value
float64_range(0, 10)    # a float from 0 up to (not including) 10
numerify("###-###")     # every "#" becomes a digit; a leading 0 becomes 1-8
values = [1, 2, 3, 4]
shuffle_ints(values)    # shuffled in place
boolean()
```

Also available: `uint16`, `uint32`, `uint64`, `int8`, `int16`, `int64`,
`float32`, `float32_range` (rounded to single precision) and `float64`.
`number` raises `ValueError` when the low end is above the high end.

### Letters and strings: `fakesmith.letters`

```python
from fakesmith.letters import letter, digit, lexify, rand_string, shuffle_strings

letter()                    # one lower-case ASCII letter
digit()                     # one ASCII digit, as a string
lexify("??-??")             # every "?" becomes a letter
rand_string(["a", "b"])     # one item, or "" for an empty list or None
words = ["x", "y", "z"]
shuffle_strings(words)      # shuffled in place
```

### Templates: `fakesmith.generate`

`generate` fills `{category.subcategory}` placeholders from the built-in
word lists, then replaces `#` with digits and `?` with letters. Unknown
placeholders become empty text; a `}` before the first `{` raises
`ValueError`.

```python
from fakesmith.generate import generate
from fakesmith.randomness import categories

generate("{hacker.adjective} {hacker.noun} ###-???")
categories()    # every category and its subcategories
```

The categories are `contact`, `job`, `internet`, `color`, `computer`,
`payment`, `beer`, `hacker` and `log_level`. HTTP status codes live in a
separate integer table used by `fakesmith.codes`. `fakesmith.data` holds the
tables themselves, with `has_values` and `has_int_values` to check for one.

### Sentences and paragraphs: `fakesmith.words`

Both take the function that supplies the words (or sentences), so any
vocabulary works. A count of zero or less gives an empty string.

```python
from fakesmith.words import sentence, paragraph
from fakesmith.hacker import hacker_noun

sentence(6, hacker_noun)    # first letter capitalised, ends with "."
paragraph(2, 3, 8, "\n", lambda n: sentence(n, hacker_noun))
```

### Passwords and identifiers

```python
from fakesmith.password import password
from fakesmith.unique import uuid

password(True, True, True, False, False, 16)   # lower, upper, numeric, special, space, length
uuid()                                         # a version 4 UUID string
```

Passwords are at least 5 characters long and hold at least one character of
each class asked for. With no class chosen, lower-case letters and digits are
used. UUIDs come from the shared random source, so they repeat under the same
seed.

### Themed word lists

| Module | Functions |
| --- | --- |
| `fakesmith.hacker` | `hacker_phrase`, `hacker_abbreviation`, `hacker_adjective`, `hacker_noun`, `hacker_verb`, `hacker_ingverb` |
| `fakesmith.beer` | `beer_name`, `beer_style`, `beer_hop`, `beer_yeast`, `beer_malt`, `beer_ibu`, `beer_alcohol`, `beer_blg` |
| `fakesmith.color` | `color`, `safe_color`, `hex_color`, `rgb_color` |
| `fakesmith.job` | `job_title`, `job_descriptor`, `job_level` |
| `fakesmith.codes` | `simple_status_code`, `status_code`, `log_level` |

`log_level` takes `"general"`, `"syslog"` or `"apache"`; anything else falls
back to the general list.

### Contact, payment and network data

```python
from fakesmith.contact import phone, phone_formatted
from fakesmith.payment import credit_card, luhn
from fakesmith.internet import ipv4_address, ipv6_address, mac_address, http_method, domain_suffix, image_url

phone()                         # ten digits
phone_formatted()               # e.g. in the "(###)###-####" layout
card = credit_card()            # a CreditCardInfo with card_type, number, exp and cvv
luhn(str(card.number))          # checks the Luhn digit
ipv4_address()
ipv6_address()                  # under the 2001:cafe prefix
mac_address()
image_url(640, 480)             # a picsum.photos placeholder link
```

`credit_card_number_luhn` returns a number that passes the Luhn check.
`credit_card_exp` gives an `MM/YY` date one to ten years in the future.

### Coordinates: `fakesmith.geo`

```python
from fakesmith.geo import latitude, longitude_in_range

latitude()                  # -90..90
longitude_in_range(10, 20)
```

`latitude_in_range` and `longitude_in_range` raise `ValueError` when the
range is reversed or outside the valid bounds.

### Dates and user agents

```python
import datetime
from fakesmith.dates import date, date_range, month, weekday
from fakesmith.useragent import user_agent, firefox_user_agent

date()          # a UTC datetime from 1900 to the current year
date_range(datetime.datetime(2000, 1, 1), datetime.datetime(2010, 1, 1))
month()         # "January" .. "December"
weekday()       # "Sunday" .. "Saturday"
user_agent()    # Chrome, Firefox, Safari or Opera
```

Also in `fakesmith.dates`: `day`, `year`, `hour`, `minute`, `second` and
`nanosecond`. Naive datetimes passed to `date_range` are taken as UTC.

### Filling dataclasses: `fakesmith.filling`

`fill(obj)` sets the public fields of a dataclass instance to random values,
in place. Strings get 19 random letters, or the expansion of the field's
`fake` metadata template; ints, floats and bools get random values; nested
dataclass fields (also `Optional` ones) are created when missing and filled.
Fields starting with an underscore, fields whose `fake` metadata is `"skip"`
and fields of other types are left alone. Anything that is not a dataclass
instance raises `TypeError`.

```python
from dataclasses import dataclass, field
from fakesmith.filling import fill

@dataclass
class Device:
    name: str = ""
    code: str = field(default="", metadata={"fake": "{hacker.abbreviation}-###"})
    notes: str = field(default="", metadata={"fake": "skip"})
    count: int = 0

device = Device()
fill(device)
```

## What it does not do

The built-in word lists cover only the categories listed above. There are no
generators for personal names, street addresses, cities, countries,
companies, e-mail addresses, usernames, domain names, URLs, lorem-ipsum
words, currencies, file types, time zones or vehicles, and no whole person
records. The package is a library only; it has no command-line program.