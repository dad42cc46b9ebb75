# textdsa

A small collection of classic data structures and text tools, with no
third-party dependencies (Python 3.10 or later):

- `textdsa.compiler`: the E++ compiler, which turns a tiny assignment
  language into stack-machine commands, and the `epp` command.
- `textdsa.parser` and `textdsa.exprtree`: E++ expression trees.
- `textdsa.symtable`: an AVL-tree `SymbolTable` of names and addresses.
- `textdsa.wordcount`: `WordDict`, counts of lower-cased words.
- `textdsa.search`: `SearchEngine`, every occurrence of a pattern in
  stored sentences.
- `textdsa.stemmer`: a Porter-style stemmer.
- `textdsa.avldict`: `StemmedDict`, word counts by stem kept in an AVL tree.
- `textdsa.structures`: a `Trie` and a `MinHeap` of `ScoredItem`s.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The E++ compiler

An E++ program has one statement per line. Tokens are separated by
whitespace and every binary operation (`+`, `-`, `*`, `/`) is fully
parenthesised:

```
x := ( 3 + 4 )
y := ( x * 2 )
del := x
ret := y
```

A statement assigns to a variable, frees a variable with `del := name`, or
returns a value with `ret := expression`. The last statement must be a
`ret`.

Compile a program from the command line:

```
epp program.e
```

The target commands are appended to `targ.txt` in the current directory.
For the program

```
x := ( 3 + 4 )
ret := x
```

the output is

```
PUSH 4
PUSH 3
ADD
mem[0] = POP
PUSH mem[0]
RET = POP
```

The command prints an error and exits with status 1 when the file cannot be
opened, when a line lacks `:=` as its second token or has unbalanced
parentheses, when the last statement is not a `ret`, or when compiling
fails (for example on an undefined variable).

From Python the same steps are available one at a time:

```python
from textdsa.compiler import EPPCompiler, memory_needed, read_program

code = read_program(["x := ( 3 + 4 )", "ret := x"])
commands = EPPCompiler("targ.txt", memory_needed(code)).compile(code)
```

`read_program` tokenises and checks lines, skipping blank ones;
`memory_needed` gives the most variables alive at once; `compile` appends
each statement's commands to the output file and also returns them all.
Problems are raised as `EPPError`.

## Symbol table

```python
from textdsa.symtable import SymbolTable

table = SymbolTable()
table.insert("x")
table.assign_address("x", 3)
table.search("x")    # 3; a key with no address gives -1
"x" in table         # True
table.remove("x")
```

`search`, `assign_address` and `remove` raise `KeyError` for a missing key.

## Counting words

```python
from textdsa.wordcount import WordDict

d = WordDict()
d.insert_sentence(1, 1, 1, 1, "The cat sat on the mat.")
d.get_word_count("the")    # 2
len(d)                     # number of distinct words
d.dump_dictionary("counts.txt")   # one "word, count" line per word
```

Words are split on spaces and the punctuation `.,-:!"'()?[];@`, and stored
in lower case; `get_word_count` looks the word up exactly as given.

`StemmedDict` in `textdsa.avldict` has the same `insert_sentence`,
`get_word_count` and `dump_dictionary` methods but counts words by their
stem, so "connected" and "connecting" are counted together. Its `tree`
attribute is an `AVLTree` of `WordEntry` objects that can be iterated,
searched with `find` and tested with `in`.

## Searching text

```python
from textdsa.search import SearchEngine

engine = SearchEngine()
engine.insert_sentence(1, 2, 3, 4, "Truth is God and God is truth")
matches = engine.search("god")
```

Sentences are compared in lower case, so give the pattern in lower case.
`search` returns a list of `Match` objects, the last one found first; each
carries the book code, page, paragraph, sentence number and the offset of
the occurrence within its sentence. Overlapping occurrences are all found.

## Stemming

```python
from textdsa.stemmer import PorterStemmer, stem

stem("connections")
PorterStemmer().stem("running")
```

Words shorter than three letters are returned unchanged.

## Trie and heap

```python
from textdsa.structures import MinHeap, Trie

trie = Trie()
trie.insert("truth")
trie.search("truth")   # the word's node, or None if not stored
trie.words()           # ["truth"]

heap = MinHeap()
heap.insert(2.5, "b")
heap.insert(1.0, "a")
heap.min().value       # "a"
heap.delete_min()      # removes and returns ScoredItem(1.0, "a")
```

`min` and `delete_min` raise `IndexError` on an empty heap.

## What it does not do

The package has no question-answering or paragraph-ranking tool: the trie,
heap and stemmed counts are building blocks only. There is no reader for
corpus files either; sentences are passed in one at a time through
`insert_sentence`. The only command is `epp`.