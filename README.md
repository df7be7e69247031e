# hemoglobin

Data structures and helpers for the Bloodless card game.

The package models cards and card identities, kins and the kin tree,
rich card text, and Bloodless numbers that may be either a precise value
or a range such as `>3`. Every model has `to_json` and a `from_json`
class method that work on plain JSON-compatible Python values (dicts,
lists, strings, integers), so card data can be read and written with the
standard `json` module. Malformed input raises `ValueError`.

The package has no runtime dependencies.

## Installing

```
pip install hemoglobin
```

For running the test suite:

```
pip install "hemoglobin[test]"
pytest
```

## Modules

- `hemoglobin.text`: `clean_ascii_keep_case` folds `ä ë ï ö ü` to plain
  vowels and removes double quotes, apostrophes, dots and commas;
  `clean_ascii` lowercases first and then does the same.
- `hemoglobin.ternary`: `Ternary`, a three-valued match result ordered
  `VOID < FALSE < TRUE`. `either` (also `|`) takes the higher value,
  `both` (also `&`) the lower, `xor` (also `^`) is `TRUE` when exactly one
  side is `TRUE` and `VOID` only when both are `VOID`; `~` swaps `TRUE`
  and `FALSE` and leaves `VOID`. `bool(t)` is true only for `TRUE`.
  `Ternary.from_bool` converts a `bool`.
- `hemoglobin.numbers`:
  - `MaybeVar`: a non-negative integer constant or a one-letter variable;
    `assume()` treats variables as zero.
  - `Operator` and `Comparison`: an operator with a number, such as
    `>= 3`. `Comparison.from_string` parses `"5"` (meaning `= 5`), `">5"`,
    `">=5"`, `"<5"`, `"<=5"`, `"=5"` and `"!=5"`; spaces or anything else
    raise `InvalidComparisonError` (a `ValueError`).
    `Comparison.compare(value)` returns a `Ternary`: `VOID` for `None`,
    a direct test for integers, and for other values a call to their
    `gt`/`gt_eq`/`lt`/`lt_eq`/`eq`/`ne` methods.
  - `MaybeImprecise`: either a `MaybeVar` or a `Comparison`, with the
    `gt`, `gt_eq`, `lt`, `lt_eq`, `eq` and `ne` tests against an integer
    and `as_comparison()`. In JSON a precise number is an integer or a
    letter, a range a string such as `">=3"`.
- `hemoglobin.ordering`: `imprecise_eq(left, right)` is a loose equality
  between integers, `MaybeVar`, `Comparison` and `MaybeImprecise` (a
  number equals a range it satisfies). `imprecise_cmp(left, right)`
  returns a negative, zero or positive integer for `MaybeVar`,
  `Comparison` and `MaybeImprecise` values; `None` sorts below everything,
  including another `None`.
- `hemoglobin.kins`: `Kin` is a `KinFamily` with an optional child
  (`InsectKin`, `PiezanKin` or `MachineKin`). `Kin.from_string` looks a
  kin up by name and returns `None` for unknown names;
  `is_same_or_child` and `equalness` (1.0 same, 0.5 child, 0.0 otherwise)
  follow the kin tree. `KinComparison` matches a kin by one of the
  `KinComparisonKind`s: `EQUAL`, `SIMILAR` (also matches children),
  `TEXT_CONTAINS`, `TEXT_EQUAL` (case-insensitive) or `REGEX_MATCH`
  (searched in the kin's canonical name).
- `hemoglobin.properties`: the `NumberProperty`, `TextProperty` and
  `ArrayProperty` enums and the `Readable` base class providing
  `num_property`, `text_property` and `vec_property`.
- `hemoglobin.rich_text`: `RichString`, a sequence of `RichElement`s
  (`TextElement`, `CardIdElement`, `SpecificCardElement`,
  `CardSearchElement`, `SagaElement`, `LineBreakElement`); `CardId`, a
  card identity whose fields may all be unset; and `Keyword`.
- `hemoglobin.cards`: `Card`, `Image` and `ImageSource`. A card gives
  `name_image_path()` (its name without spaces, cleaned with
  `clean_ascii_keep_case`), `image_path(index)` and
  `random_image_path()` (a random file of the chosen image, falling back
  to the name-based path) and `artists()`.

Health, defense and power of cards and card identities whose type
contains `command` are reported as absent (`None`).

## Example

```python
import json

from hemoglobin.cards import Card
from hemoglobin.numbers import Comparison
from hemoglobin.properties import NumberProperty

with open("cards.json", encoding="utf-8") as fh:
    cards = [Card.from_json(entry) for entry in json.load(fh)]

cheap = Comparison.from_string("<=2")
for card in cards:
    if cheap.compare(card.num_property(NumberProperty.COST)).is_true():
        print(card.name, card.name_image_path())
```

## What it does not do

- There is no command-line program and no server; it is a library only.
- There is no search-query language or search engine: matching is done
  by calling the comparison, kin and property helpers directly.
- There is no storage layer; reading and writing files is left to the
  caller.
- Keyword data is written only in its tagged card-identity form: string
  data, and identities that carry a `type` of their own, raise
  `ValueError` from `Keyword.to_json`.