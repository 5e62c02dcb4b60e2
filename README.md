# sortviz

An interactive window that shows classic sorting algorithms at work, one
comparison, swap or write at a time. Numbers are drawn as bars with their
values underneath; bars being compared light up yellow, bars being moved or
written turn red, and bars known to be in their final place turn green.

Eight algorithms are included:

- Bubble sort, insertion sort and selection sort (`sortviz.simple_sorts`)
- Merge sort and quick sort (`sortviz.partition_sorts`)
- Heap sort (`sortviz.heapsort`)
- Counting sort and radix sort (`sortviz.distribution_sorts`)

Radix sort works on non-negative numbers only; given a negative value it
shows a message for two seconds and leaves the array as it is. Counting sort
handles negative numbers.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Running

```
sortviz
```

The window has a control panel on the left and the bars on the right.

### Building an array

- **Random Array** fills the array with 50 random numbers between 1 and 200.
- **Clear Array** empties it.
- Type digits into the **Add Number** box (up to five digits) and press
  Enter to append the number. The array holds at most 137 numbers.
  Backspace removes the last digit typed. Characters other than digits are
  ignored.

### Sorting

Click one of the algorithm buttons to sort the current array. If the array
is empty, the status line says so and nothing runs. While a sort runs, the
buttons are disabled and the status line shows the algorithm, its current
phase and the current delay. When it finishes, the sorted array stays on
screen and the status line reports completion.

### Keys

| Key            | Effect                                          |
|----------------|-------------------------------------------------|
| `+` or `=`     | Faster: delay between steps down by 10 ms       |
| `-`            | Slower: delay between steps up by 10 ms         |
| Space          | Pause or resume a running sort                  |
| Esc            | Close the window                                |

The delay starts at 50 ms and stays between 0 and 300 ms. It can be changed
both before and during a sort.

## Using the algorithms from code

Each sort function takes a list, sorts it in place, and is a generator that
yields one `sortviz.core.Step` per frame, ending with a completion frame.
A `Step` holds a snapshot of the array (`array`), the highlighted indices
(`comparing`, `swapped`, `sorted_indices`) and a status `label`;
`Step.sleep_ms(delay_ms)` gives how long the frame is held.

```python
from sortviz.simple_sorts import bubble_sort

data = [5, 2, 9, 1]
frames = list(bubble_sort(data))
print(data)              # [1, 2, 5, 9]
print(frames[-1].label)  # Bubble Sort Complete
```

`sortviz.core.layout_bars` turns an array and a `sortviz.core.Area` into a
list of `Bar` positions, sizes and colours without drawing anything, and
`sortviz.render.Renderer` draws frames onto a pygame surface.

## Tests

```
pip install .[test]
pytest
```