# packetproc

`packetproc` works on simple sample files. Each line of a sample file holds a numeric id, the separator ` , ` and a piece of text in standard base64:

```
123456 , 2LPZhNin2YU=
```

The package can create such files with random text. That text mixes A–Z, a–z and characters from the Arabic/Persian block (U+0600–U+06FF). The package then decodes each line, counts what the text holds, and writes one CSV line per sample:

```
id,count,persian_count,english_count,english_ratio
```

- `count` is the length of the decoded text in UTF-8 bytes.
- `english_count` is the number of ASCII letters (A–Z, a–z).
- `persian_count` is `count - english_count`.
- `english_ratio` is `english_count * 100 // count`, an integer percentage.

The output file has no header line.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Command line

```
packetproc [-i INPUT] [-o OUTPUT] [-n SAMPLES]
```

- `-i` gives the input file. If you leave it out, a file named `RandomSample_<YYYY-MM-DD_HH-MM-SS>.txt` is created in the current directory, holding `-n` random samples.
- `-o` gives the output file. By default it is `result_<input name>`, placed next to the input.
- `-n` gives the number of samples to create or to process in the batch pass. The default is 100.

The command processes the input twice, into the same output file, and prints the time each pass takes in milliseconds:

1. One line at a time: read a line, count it, write it. This stops at the end of the file or at the first line that cannot be parsed.
2. In one batch: read up to `-n` results, then format them all, then write them all. This pass always writes exactly `-n` lines; if the input has fewer, the rest are `0,0,0,0,0`. It overwrites what the first pass wrote.

## Library use

```python
from packetproc.generator import write_random_pairs_to_file
from packetproc.processor import Counter, count_and_write_one_by_one, generate_result_file_name

write_random_pairs_to_file("samples.txt", 10)

with Counter("samples.txt") as counter:
    for result in counter:
        print(result.csv_string())

count_and_write_one_by_one("samples.txt", generate_result_file_name("samples.txt"))
```

`packetproc.processor` also has `CsvReader`, which yields `Pair` objects (`id`, decoded `text`), and `count_and_write_in_one_batch(input_file, output_file, n_samples)`. When no complete line is left, `CsvReader.next_pair_decoded` and `Counter.count_next_pair` raise `EOFError`; a line whose id cannot be parsed raises `ValueError`. Iterating a reader or counter ends at `EOFError`.

`packetproc.generator` has the random helpers: `generate_string`, `generate_encoded_base64`, `generate_id`, `new_random_pair_base64`, `generate_random_pairs_base64` and `generate_random_sample_file_name`. Random texts are at most 70 UTF-8 bytes long, and ids fall in the range 100000–999998.

Helpers for counting, encoding and timing are in `packetproc.textutils`:

```python
from packetproc.textutils import count_english_chars, encode_base64, decode_base64

count_english_chars("<UNKsdfسیبمنت>")   # 6
decode_base64(encode_base64("سلام"))     # "سلام"
decode_base64("not base64!")             # ""
```

`Timer` measures elapsed time in whole milliseconds (`start`, `diff_milli`, `print_diff_milli`).

## Tests

```
pytest
```