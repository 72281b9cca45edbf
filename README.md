# dgpkit

This package provides building blocks for programs that read, write and
transform 3D geometry files. It is pure Python and has no dependencies.

## Modules

### `dgpkit.tokenizer`

`Tokenizer(source, skip_comments=True)` reads tokens from a string or from a
text stream.

- Spaces, tabs, newlines, carriage returns and commas separate tokens.
- A token that starts with `#` runs to the end of its line and is a comment.
  Comments are skipped unless `skip_comments` is false.
- The last token read is kept in the `token` attribute.

Reading tokens:

- `get()` returns the next token, or `None` at the end of the input.
- `require(message)` returns the next token, or raises `TokenError(message)`
  at the end of the input.
- Iterating over a tokenizer yields each token in turn.
- `getline()` returns the rest of the current line, or `None` if that is empty.
- `nextline()` skips to the start of the next line.

Typed readers:

- `get_bool()` accepts `t`, `true`, `T`, `TRUE`, `f`, `false`, `F` and `FALSE`.
- `get_int()` reads a signed integer.
- `get_uint()` reads an integer and wraps it to 32-bit unsigned.
- `get_float()` reads a float and rounds it to single precision.
- `get_color()`, `get_vec2f()`, `get_vec3f()` and `get_vec4f()` return tuples
  of floats.

Each typed reader raises `TokenError`, a subclass of `ValueError`, if the
input does not match.

Checking tokens:

- `equals(text)` tests the current token.
- `expecting(text)` reads the next token and tests it.

### `dgpkit.bbox`

`BoundingBox(dimension=3, points=None, cube=False)` is an axis-aligned box.

- `points` is a flat sequence of coordinates, with `dimension` values per
  point.
- If `points` is not given, the box is the unit box from 0 to 1 on every axis.
- With `cube=True`, the box grows around its centre until every side is as
  long as the longest one.
- The box is never flat. Along any axis of zero extent it is widened by 5% of
  the smallest non-zero half side, or by 0.05 when every side is zero.

Attributes: `dimension`, `min`, `max` and `step` (the longest side when the
box was built).

Methods:

- `center(i)` and `side(i)`. An axis index out of range is clamped. `side()`
  with no argument returns the longest side.
- `max_side()` and `diameter()`.
- `set_min(values)` and `set_max(values)`. These raise `ValueError` unless
  exactly `dimension` values are given.

### `dgpkit.rotation`

These functions work with rotation vectors `(angle_in_degrees, ux, uy, uz)`.
The axis does not have to be unit length, and a zero axis means the
identity. Matrices are flat lists of 16 numbers in column-major order.

- `rotate(r, x)` rotates a 3-vector.
- `axis_angle_to_matrix(angle_deg, u0, u1, u2)` and `vector_to_matrix(r)`
  build a 4×4 matrix.
- `matrix_to_vector(m)` recovers the angle and a unit axis. It returns all
  zeros when there is no well-defined axis.
- `multiply_matrices(a, b)` returns `a * b`.
- `vector_multiply_left(angle_deg, u0, u1, u2, r)` applies the given rotation
  after `r` and returns the combined rotation vector.
- `cross_product(x, y)` returns the cross product of two 3-vectors.

### `dgpkit.registry`

`Loader` and `Saver` are abstract bases with an `ext` attribute (the file
extension, without the dot) and a `load(filename, scene)` or
`save(filename, scene)` method.

`LoaderRegistry` and `SaverRegistry` pick a handler by the text after the
last `.` in the file name. `extension_of(filename)` returns that text, or
`None` if the name has no dot.

- `register()` ignores `None`.
- The first handler registered for an extension wins.
- `load`/`save` raise `ValueError` when the name has no extension or no
  handler is registered for it.

## Example

```python
from dgpkit.tokenizer import Tokenizer
from dgpkit.bbox import BoundingBox
from dgpkit.rotation import rotate

tkn = Tokenizer("# comment\ntranslation 1, 2, 3\n")
assert tkn.expecting("translation")
print(tkn.get_vec3f())          # (1.0, 2.0, 3.0)

box = BoundingBox(3, [0, 0, 0, 2, 4, 6], False)
print(box.max_side())           # 6
print(box.diameter())           # sqrt(56)

print(rotate((90.0, 0.0, 0.0, 1.0), (1.0, 0.0, 0.0)))   # close to (0, 1, 0)
```

## What this package does not do

The package has no scene graph types and no concrete loaders or savers. It
cannot read or write any file format by itself: you supply `Loader` and
`Saver` subclasses and register them. There is no command-line program and
no viewer.

## Tests

```
pip install -e .[test]
pytest
```