# tinkerkit

A grab bag of small, self-contained tools: number types, sequence
generators, a pencil-mark sudoku solver, a protobuf wire-format reader,
a minimal PNG chunk reader, a PPM gradient renderer and a handful of
puzzle solutions. Pure Python, no runtime dependencies.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

### Numbers

- `tinkerkit.complex`: `Complex(real, imaginary)` with `+`, `-`, `*`
  (by another `Complex` or a number), `/`, negation, `mag()`, `magsq()`,
  `is_zero()` and `conjugate()`. `str()` drops a part that is within
  `1e-10` of zero.
- `tinkerkit.quaternion`: `Quaternion(a, b, c, d)` over ints or floats,
  with arithmetic, `conjugate()`, `norm()` (integer square root for
  integer quaternions), `norm2()`, `normalize()`, `recip()` and
  `rot_conj(half_angle)`, which requires a pure quaternion (`a == 0`).
- `tinkerkit.matrix`: `Matrix2D`, built with `new_empty`, `new_zero`,
  `new_with_value` or `from_vec`. It supports element-wise `+`/`-` with
  another matrix or a number, `*` by a number, matrix multiplication
  with `*`, and `fill(value)`.
- `tinkerkit.polynomial`: `solve_linear(a, b)` and
  `solve_quadratic(a, b, c)`. An equation with no solution raises
  `PolynomialError`, whose `kind` is an `ErrorType`.
- `tinkerkit.fourier`: `my_dft(samples)` returns `(amplitude, phase)`
  pairs for each frequency bin up to half the sample count.

```python
from tinkerkit.polynomial import solve_quadratic

roots = solve_quadratic(1.0, -4.0, 3.0)   # the roots 1 and 3, as Complex values
```

### Sequences

- `tinkerkit.fib`: `fib_u32(n)` and `fib_u64(n)`. They raise
  `OverflowError` when the result does not fit in 32 or 64 bits.
- `tinkerkit.pell`: Pell numbers four ways, `pell_memo`, `pell_recurse`,
  `pell_generator` (backed by `PellGenerator`) and `pell_fib`. Results
  are limited to 128 bits.

### Sudoku

`tinkerkit.sudoku_parse.parse_str_1(text)` reads a board. Digits 1 to 9
are givens, whitespace is skipped and any other character is an empty
cell. `tinkerkit.sudoku_solver.attempt_solve(board, options)` fills in
pencil marks and applies the single-candidate and pointing-pencil
strategies until nothing changes. It returns whether the board ended up
solved. `SolverOptions` chooses the strategies. `SolverOptions.all()`
turns on every strategy and also prints each step. `is_solved(board)`
checks a board. `tinkerkit.sudoku_display` has `render_basic` and
`render_full`, which return a board as text without and with its pencil
marks. Boards, cells and positions live in `tinkerkit.sudoku_board`
(`Board`), `tinkerkit.sudoku_cell` (`Cell`, `Pencil`) and
`tinkerkit.sudoku_pos` (`to_pos`, `to_index`, `pos_to_box`).

```python
from tinkerkit.sudoku_parse import parse_str_1
from tinkerkit.sudoku_solver import SolverOptions, attempt_solve
from tinkerkit.sudoku_display import render_basic

with open("puzzle.txt") as f:
    board = parse_str_1(f.read())
solved = attempt_solve(board, SolverOptions(one_pencil_rem_cell=True, one_pencil_rem_box=True))
print(render_basic(board))
```

### Formats

- `tinkerkit.protobuf` provides `parse_varint`, `unpack_tag`,
  `parse_field` and `parse_message(data, message_type)`. The message
  types are `Person` (name, id, phone numbers) and `PhoneNumber`.
  Malformed input raises `ProtobufError`.
- `tinkerkit.png` provides `Png.from_bytes(data)`, which walks the chunks
  after the 8-byte signature and stops at `IEND`. It records the IHDR
  header, the palette, the background colour (`bKGD`), the
  chromaticities (`cHRM`), the physical dimensions (`pHYs`) and the text
  chunks. The helpers `cast_2u8_u16`, `cast_4u8_u32`, `parse_chunk` and
  `parse_idat_all` are public.

### Geometry and rendering

- `tinkerkit.vec3`: `Vec3` (alias `Point3`) with arithmetic, `dot`,
  `cross`, `length`, `length2` and `normalize`.
- `tinkerkit.raytrace`: `write_color(f, color)` and
  `render_gradient(out, width, height, progress)`. The latter writes a
  plain PPM (P3) colour gradient.

### Puzzles and odds and ends

- `tinkerkit.atoi.my_atoi` converts a string to a 32-bit integer with saturation.
- `tinkerkit.ipaddr.valid_ip_address` returns `"IPv4"`, `"IPv6"` or
  `"Neither"`. It is backed by `validate_v4` and `validate_v6`.
- `tinkerkit.redundant.find_redundant_connection` uses union-find to
  search for the edge that closes a cycle.
- `tinkerkit.gas_station` provides `station_deltas` and `running_totals`.
- `tinkerkit.euler` provides `column_sums`, `large_sum_prefix`,
  `gen_log_facs`, `log_choose`, `bsearch_lbound` and
  `count_large_combinations`.
- `tinkerkit.homefile.read_hello_file(home)` creates or reads
  `.helloworld`.
- The remaining tools are `tinkerkit.linked_list.Node`,
  `tinkerkit.growable.GrowableList`, `tinkerkit.forums` (`Forum`,
  `Anon`) and `tinkerkit.ordering.compare_ordered_option`, which returns
  an `Ordering`.

## Commands

```
tinkerkit-png [FILE]              # summarise a PNG file (default: interesting.png in the current directory)
tinkerkit-gradient [WIDTH HEIGHT] # write a PPM gradient (default 256x256) to standard output
tinkerkit-euler                   # print the large-sum digits and the combinatoric count
tinkerkit-hello [HOME]            # create or read .helloworld in your home directory
```

For example:

```
tinkerkit-gradient > gradient.ppm
```

## What it does not do

- The PNG reader does not inflate the compressed image data and does not
  undo scanline filters. Its `pixels` are read straight from the raw IDAT
  bytes. Pixels are only decoded for colour images, and every other
  colour type yields empty pixels. It does not check CRCs and cannot
  write PNG files.
- The sudoku solver only applies its deduction strategies. It does no
  guessing or backtracking, so harder puzzles may stay unsolved.
- The protobuf reader handles only the varint, length-delimited and
  32-bit wire types, and has no schema beyond `Person` and
  `PhoneNumber`.