# floodforge

Building blocks for Rain World map editing: a catalog of creature and tag
images, the rules for creature dens and their tag sliders, region acronym
entry and room renaming, a parser for a small Markdown dialect, a stack of
popup dialogs without any drawing, and a body-chunk physics simulation.

The package has no dependencies beyond the Python standard library
(Python 3.10 or later).

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Creature catalog

`floodforge.creatures.CreatureCatalog.load(directory)` reads a creatures
asset folder. Without a `mods.txt` the catalog is empty. Otherwise it
collects the `.png` images in the folder itself, in each folder listed in
`mods.txt`, in `room/` (named with a `room-` prefix and not offered as a
choice) and in `TAGS/`. `CLEAR` is moved to the front of the creature list
and `UNKNOWN` to the end. `parse.txt` holds `from>to` name aliases.

```python
from floodforge.creatures import CreatureCatalog

catalog = CreatureCatalog.load("assets/creatures")
catalog.creatures            # creature names, in choice order
catalog.tags                 # tag names
catalog.parse("OldName")     # alias resolved, or the name unchanged
catalog.known("GreenLizard") # True if it (after aliasing) has an image
catalog.texture_path("MEAN") # image path for a tag or creature
```

`texture_path` returns the `UNKNOWN` image for unrecognised types and
`None` for the empty type.

## Creature dens

`floodforge.dens` holds a `Den` (type, count, tag, data) and the rules that
keep it consistent:

```python
from floodforge.dens import Den, choose_creature, toggle_tag, set_slider, format_slider_value

den = Den()
choose_creature(den, "GreenLizard", shift=False)   # one GreenLizard
slider = toggle_tag(den, "MEAN")                   # SliderRange(-1.0, 1.0, FLOAT)
set_slider(den, slider, 0.75)                      # den.data == 0.5
format_slider_value(den)                           # "0.50"
```

- `ensure_flag(den)` drops tags the creature cannot carry (`MEAN` and
  `RotType` need a lizard, `LENGTH` needs `PoleMimic` or `Centipede`,
  `Winter` and `Voidsea` have their own creature lists), resets the value
  unless the tag is `MEAN`, `LENGTH` or `SEED`, and returns the tag's
  `SliderRange`.
- `choose_creature(den, creature_type, shift)`: `CLEAR` empties the den;
  the den's own type or `UNKNOWN` adds one, or removes one with shift;
  any other type replaces the creature with a single one.
- `toggle_tag(den, tag)` sets or removes a tag.
- `set_slider(den, slider, progress)` maps a 0–1 position onto the range,
  rounding for `SliderType.INT`.
- `is_lizard(creature_type)` tells lizards apart.

## Regions

`floodforge.region` has the room tag lists (`ROOM_TAGS`,
`ROOM_TAG_NAMES`) and acronym handling:

```python
from floodforge.region import AcronymInput, offscreen_den_names, rename_room

entry = AcronymInput(on_accept=print)
entry.type_character("s", shift=True)
entry.type_character("u", shift=False)
entry.is_valid()   # True: at least two characters
entry.accept()     # prints "Su"

offscreen_den_names("SU")     # ("offscreendensu", "OffscreenDenSU")
rename_room("ab_a01", "SU")   # "su_a01"
```

`AcronymInput` ignores `/`, `\` and `_`, and `paste` upper-cases what it
is given. `rename_room` raises `ValueError` for a name without a `_`.

## Popups

`floodforge.popups.PopupStack` holds open popups. `add` opens a popup only
if every open one allows it through `can_stack`; closing a popup marks it,
and `cleanup` removes the marked ones. `popup_at(x, y)` finds the popup
under a point and `has_popup(name)` checks by name.

```python
from floodforge.popups import PopupStack, ConfirmPopup, InfoPopup

stack = PopupStack()
confirm = ConfirmPopup("Quit?").on_okay(lambda: print("bye"))
stack.add(confirm)
stack.add(InfoPopup("Saved"))   # allowed alongside a confirm popup
confirm.accept()                # closes it and calls the okay listeners
stack.cleanup()
```

`Popup.click` handles the header's close and minimise buttons; `drag` says
whether a press grabs the header; `offset` moves the popup.

## Markdown

`floodforge.md_text.parse_markdown(text)` turns a document into a list of
`(LineType, [StyledText, ...])` pairs: `#`, `##`, `###` headings, `> `
quotes, `---` / `***` / `___` rules and text. `parse_styled_text(line)`
handles `\` escapes, `` `code` ``, `**bold**`, `~~strike~~`,
`__underline__`, `*italic*` / `_italic_` and `[text](url)` links.
`load_markdown(path)` reads a file.

## Physics

`floodforge.physics` simulates `BodyChunk`s joined by
`BodyChunkConnection`s of type `NORMAL`, `PULL` or `PUSH`, with gravity,
air friction and a floor at y = -10.

```python
from floodforge.physics import create_leviathan
from floodforge.vector import Vector2

sim = create_leviathan()   # three chunks, two links and a push link
for _ in range(30):
    sim.step()
sim.grab(sim.chunks[0].position)
sim.drag(Vector2(20.0, 40.0))
sim.release()
```

## Geometry

`floodforge.vector` has `Vector2` and `Vector3`; `floodforge.shapes` has
`Rect`, `Colour`, `Direction`, `lerp` and `direction_to_vector`.

## What it does not do

There is no editor window, no drawing and no command to run. The package
has no tile grid or level files: it cannot save, load or export rooms,
produce collision text, or keep backup copies of files. It offers no
matrix maths for rendering.