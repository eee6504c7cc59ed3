import time
from lexutil.modules.char_sequence import chars_with_eot
from lexutil.modules.column import get_col
from lexutil.modules.rendering import munge_chars

# Many short lines vs. one long line of the same total size
short_lines = chars_with_eot("let x = 1;\n" * 20000)
long_line = chars_with_eot("let x = 1; " * 20000)

indices = range(0, len(short_lines) - 1, 97)

start_time = time.time()
for index in indices:
    get_col(short_lines, index)
end_time = time.time()
print(f"get_col, short lines: {end_time - start_time:.6f} seconds")

start_time = time.time()
for index in indices[:200]:
    get_col(long_line, index)
end_time = time.time()
print(f"get_col, one long line (200 lookups): {end_time - start_time:.6f} seconds")

start_time = time.time()
munge_chars(short_lines)
end_time = time.time()
print(f"munge_chars, {len(short_lines)} chars: {end_time - start_time:.6f} seconds")
