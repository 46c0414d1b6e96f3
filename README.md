# alarmtimer

A small desktop stopwatch built on tkinter. It counts up once a second,
records lap times and raises an alarm when a target time is reached.

tkinter ships with most Python installations. It is the only requirement
beyond the standard library.

## Running

```
alarmtimer [--config PATH] [--sound PATH]
```

- `--config`: the settings file. The default is
  `alarmeffect/configuration.json`.
- `--sound`: the alarm sound file. The default is `alarmeffect/AlarmBgm.mp3`.
  The path is written to the debug log and is not used for anything else.

Both paths are relative to the working directory.

The window shows the current local time as `Time: [hh : mm : ss]`, the elapsed
time, the target time and ten lap slots. It has these buttons:

- **Start**: starts or resumes counting.
- **Stop/Reset**: pauses the stopwatch if it is running. If it is already
  stopped, the press clears the elapsed time and re-arms the alarm.
- **Lap**: writes the shown time into the next of the ten lap slots. After the
  tenth slot it starts again at the first. Laps are only taken while the
  stopwatch runs.
- **Set Timer**: opens a dialog with spin boxes for hours (0–99), minutes
  (0–59) and seconds (0–59), and the buttons Accept, Reset and Close. Accept
  sets the target to `hh : mm : ss`. Hours above 23 are not a valid time of
  day, so in that case the target becomes empty.

After each tick the elapsed time is compared with the target as text. When
the elapsed time reaches the target, the stopwatch stops and the display shows
the target time. The alarm rings the window's bell once, and it rings again
only after a reset. A target of `00 : 00 : 00` means there is no alarm.

The target time is read from the settings file when the window opens. When
the window closes, the target time is written back to that file. If the file
is missing or cannot be read, the target starts out empty, and the alarm then
sounds on the first tick. A save that fails is only logged.

## Using the pieces directly

```python
from alarmtimer.stopwatch import Stopwatch, format_hms
from alarmtimer.target_time import TargetTimeForm, format_target_time
from alarmtimer.config import TimeConfiguration, ConfigError

format_hms(3725)                # '01 : 02 : 05'  (wraps at one day)
format_target_time(0, 0, 3)     # '00 : 00 : 03'
format_target_time(24, 0, 0)    # ''

watch = Stopwatch(target_time="00 : 00 : 03", on_alarm=lambda: print("ring"))
watch.start()
watch.lap()                     # 0, the lap slot that was written
results = [watch.tick() for _ in range(3)]   # [False, False, True]
watch.current_time              # '00 : 00 : 03'
watch.started                   # False
```

- `Stopwatch(target_time, on_alarm, on_stop_sound, lap_slots)` has the methods
  `start()`, `stop_reset()`, `lap()`, `tick()` and `set_target()`. The
  attributes `elapsed_seconds`, `current_time`, `laps`, `lap_count` and
  `sound_played` hold its state. `on_stop_sound` is called whenever a reset
  clears the count.
- `TargetTimeForm.accept(hours, minutes, seconds)` clamps the values to the
  dialog's ranges and returns the formatted target time. `reset()` zeroes the
  fields and sets the target to `00 : 00 : 00`.
- `TimeConfiguration(config_path)` starts from the defaults `00 : 00 : 00`,
  `1.0` and `AlarmApp`, then loads the file. If the file cannot be loaded,
  the defaults stay. `TimeConfiguration()` with no path leaves every field
  empty.
- `load(path)` reads the JSON fields `target_time`, `version` and `name`. It
  raises `ConfigError` when the file cannot be read or does not hold a JSON
  object.
- `save()` writes the fields as indented JSON. It raises `ConfigError` when
  no path is set or the write fails.
- `alarmtimer.app.MainWindow(root, config_path, sound_path)` builds the window
  on a tkinter root. With `root=None` it keeps its state and shows nothing.
  `close()` stops the timer and saves the settings.

## What it does not do

- The alarm sound file is not played. The alarm only rings the window's bell.
- Laps and the elapsed time are not saved between runs. Only the target time
  is stored.

## Tests

```
pip install -e .[test]
pytest
```