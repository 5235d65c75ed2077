# transportkit

Small, dependency-free tools for working with the output of particle
transport simulations:

- **Neutron multiplicity analysis** – turn a sorted list of detection times
  (in nanoseconds) into foreground and background multiplicity
  distributions, their factorial moments and the singles, doubles, triples
  and quadruples count rates, then solve the multiplicity equations for
  fission rate, multiplication, alpha ratio and detection efficiency.
- **Track conversion** – record step segments as plain text lines and turn
  them into a legacy ASCII VTK unstructured grid of line cells.
- **Dose bookkeeping** – accumulate energy deposits per event and per run
  and report the dose and its spread in a scoring volume.
- **Primary generation** – place primary particles at random across the
  upstream face of a box-shaped envelope.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Analyse a detection-time list together with the file holding the number of
emitted neutrons (the first number of every non-blank line is read; the last
value of the emission file is used):

```
transportkit-analyze LIST.dat LIST_emit.dat
```

Both arguments are optional and default to `LIST.dat` and `LIST_emit.dat`.
One line is printed with, in order: fission rate, multiplication, alpha,
efficiency, singles, doubles, triples, quadruples, mass, and the emitted
count divided by 4308000.

## Library use

### Moments

`transportkit.moments`:

- `integer_range(start, stop)` – the inclusive sequence `start, ..., stop`
  as floats;
- `elementwise_product(*args)` – the element-by-element product of
  sequences of equal length (`ValueError` otherwise);
- `factorial_moment(weights, order)` – `sum(w[k] * k * (k-1) * ... * (k-order+1))`;
  order 0 is the plain sum;
- `read_values(path)` – the first number of every non-blank line of a file.

### Multiplicity

`transportkit.multiplicity`:

```python
from transportkit.multiplicity import analyze, analyze_files

result = analyze_files("LIST.dat", "LIST_emit.dat")
print(result.multiplication, result.fission_rate)
```

`analyze(times, emitted)` does the same on values already in memory and
returns a frozen `MultiplicityResult` with the fields `fission_rate`,
`multiplication`, `alpha`, `efficiency`, `singles`, `doubles`, `triples`,
`quadruples` and `mass`. The steps are available on their own:

- `foreground_distribution(times, gate, size)` – histogram of how many later
  events fall inside a gate opened at each event between 5 % and 95 % of the
  last time;
- `background_distribution(times, gate, size, samples)` – histogram of
  multiplicities over `samples - 1` background gates;
- `bisect(func, low, high, tolerance)` – bisection root finder returning the
  final bracket; raises `ValueError` if the function does not change sign.

Gate width (100 ns), histogram size (25), cross-talk factor and the fission
multiplicity distributions are module constants.

### Tracks

`transportkit.tracks` writes and reads step segments, two 3-D points per
line, and converts them into VTK:

```python
from transportkit.tracks import append_segment, convert_segments

append_segment("steps.txt", (0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
append_segment("steps.txt", (1.0, 0.0, 0.0), (1.0, 2.0, 0.0))
convert_segments("steps.txt", "tracks.vtk")  # returns 2
```

`format_segment(start, end)`, `read_segments(path)` and
`segments_to_vtk(segments)` expose the individual steps.

### Dose

`transportkit.dose` accumulates deposited energy per event and per run:

```python
from transportkit.dose import EnergyAccumulator, EventDeposit, run_summary

run = EnergyAccumulator()
event = EventDeposit(run)
event.begin()
event.add(1.5)
event.add(0.5)
event.end()

print(run_summary(1, run, 2.0, "gamma of 6 MeV", True))
```

`EnergyAccumulator` keeps the sum of deposits and of their squares, with
`add`, `reset`, `merge` and `rms(events)`. `run_summary` takes energies in
joules and mass in kilograms, prints the dose in the best-fitting unit from
Gy down to picoGy, and returns `None` for a run with no events.

### Primaries

`transportkit.primaries` describes the envelope volume with `Envelope`
(lengths in millimetres; `default_envelope()` gives the 20 x 20 x 30 cm
water box) and draws primaries with `PrimaryGenerator.generate(rng)`, which
returns a `Vertex` (particle, energy in MeV, position, direction). `rng` is
a `random.Random` instance, so runs can be made reproducible by seeding it.
With no envelope set, an `EnvelopeWarning` is issued and the gun is placed
at the centre.

## What this package does not do

It does not transport particles itself: there is no physics engine, no
detector geometry beyond the envelope box, and no viewer. It works on the
time lists, step segments and energy deposits that a transport simulation
produces, and writes VTK files for viewing elsewhere.