# wordinflect

Small, dependency-free helpers for inflecting English words and spelling out
numbers. Requires Python 3.10 or later.

## Installation

```
pip install wordinflect
```

## Numbers

```python
from wordinflect.number import (
    number_to_words, number_to_words_with_and, number_to_words_float,
    number_to_words_threshold, number_to_words_grouped, format_number,
)

number_to_words(42)                 # "forty-two"
number_to_words(-5)                 # "negative five"
number_to_words_with_and(1101)      # "one thousand one hundred and one"
number_to_words_float(3.14)         # "three point one four"
number_to_words_float(3.14, "dot")  # "three dot one four"
number_to_words_float(5.0)          # "five"
number_to_words_threshold(5, 10)    # "five"
number_to_words_threshold(15, 10)   # "15"
number_to_words_grouped(1234, 2)    # "twelve thirty-four"
number_to_words_grouped(1234, 0)    # "one thousand two hundred thirty-four"
format_number(1234567)              # "1,234,567"
format_number(-1234)                # "-1,234"
```

`number_to_words_float` raises `ValueError` for infinities and NaN.
`number_to_words_grouped` splits the digits from the right and spells each
group on its own; a group size of zero or less spells the whole number.

## Ordinals

```python
from wordinflect.ordinal import (
    ordinal, ordinal_suffix, ordinal_word,
    word_to_ordinal, is_ordinal, ordinal_to_cardinal,
)

ordinal(21)                          # "21st"
ordinal(-1)                          # "-1st"
ordinal_suffix(112)                  # "th"
ordinal_word(101)                    # "one hundred first"
ordinal_word(-1)                     # "negative first"
word_to_ordinal("42")                # "42nd"
word_to_ordinal("Twenty-One")        # "Twenty-First"
is_ordinal("twenty-first")           # True
is_ordinal("one")                    # False
ordinal_to_cardinal("21st")          # "21"
ordinal_to_cardinal("SECOND")        # "TWO"
```

`word_to_ordinal` and `ordinal_to_cardinal` keep the case pattern of their
input (lower, upper or title case) and return anything they do not recognise
unchanged.

## Plurals and counts

```python
from wordinflect.plural import Engine, plural, no, num, get_num

plural("child")     # "children"
plural("knife")     # "knives"
plural("CHILD")     # "CHILDREN"
no("error", 0)      # "no errors"
no("error", 1)      # "1 error"
no("child", 3)      # "3 children"

num(5)              # stores a default count, returns 5
get_num()           # 5
num()               # clears it, returns 0
```

The module-level functions use a shared default `Engine`. Create your own
`Engine` for independent settings and state; its flags select classical
usage:

```python
Engine(classical_ancient=True).plural("formula")  # "formulae"
Engine(classical_persons=True).plural("person")   # "persons"
Engine(classical_herd=True).plural("bison")       # "bison" (otherwise "bisons")
Engine(classical_names=True).plural("Jones")      # "Jones" (otherwise "Joneses")
Engine(classical_zero=True).no("error", 0)        # "no error"
```

## Present participles

```python
from wordinflect.participle import present_participle, is_participle

present_participle("run")    # "running"
present_participle("make")   # "making"
present_participle("die")    # "dying"
present_participle("panic")  # "panicking"
present_participle("Make")   # "Making"
is_participle("taken")       # True
is_participle("sing")        # False
```

## What it does not do

The package forms plurals of nouns only. It does not give singular forms,
past tenses or past participles, nor plural forms of pronouns, verbs or
adjectives, and it has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```