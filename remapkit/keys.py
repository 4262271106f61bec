"""Key codes, their names and the parser for key names used in config files."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "ConfigError",
    "Key",
    "parse_key",
    "key_name",
    "DISGUISED_EVENT_OFFSETTER",
    "KEY_MATCH_ANY",
]


class ConfigError(ValueError):
    """Raised when a configuration value cannot be understood."""


_MAIN_KEYS = (
    "RESERVED ESC 1 2 3 4 5 6 7 8 9 0 MINUS EQUAL BACKSPACE TAB Q W E R T Y U I O P "
    "LEFTBRACE RIGHTBRACE ENTER LEFTCTRL A S D F G H J K L SEMICOLON APOSTROPHE GRAVE "
    "LEFTSHIFT BACKSLASH Z X C V B N M COMMA DOT SLASH RIGHTSHIFT KPASTERISK LEFTALT "
    "SPACE CAPSLOCK F1 F2 F3 F4 F5 F6 F7 F8 F9 F10 NUMLOCK SCROLLLOCK KP7 KP8 KP9 "
    "KPMINUS KP4 KP5 KP6 KPPLUS KP1 KP2 KP3 KP0 KPDOT"
).split()

_KEYS_FROM_85 = (
    "ZENKAKUHANKAKU 102ND F11 F12 RO KATAKANA HIRAGANA HENKAN KATAKANAHIRAGANA MUHENKAN "
    "KPJPCOMMA KPENTER RIGHTCTRL KPSLASH SYSRQ RIGHTALT LINEFEED HOME UP PAGEUP LEFT "
    "RIGHT END DOWN PAGEDOWN INSERT DELETE MACRO MUTE VOLUMEDOWN VOLUMEUP POWER KPEQUAL "
    "KPPLUSMINUS PAUSE SCALE KPCOMMA HANGEUL HANJA YEN LEFTMETA RIGHTMETA COMPOSE STOP "
    "AGAIN PROPS UNDO FRONT COPY OPEN PASTE FIND CUT HELP MENU CALC SETUP SLEEP WAKEUP "
    "FILE SENDFILE DELETEFILE XFER PROG1 PROG2 WWW MSDOS COFFEE ROTATE_DISPLAY "
    "CYCLEWINDOWS MAIL BOOKMARKS COMPUTER BACK FORWARD CLOSECD EJECTCD EJECTCLOSECD "
    "NEXTSONG PLAYPAUSE PREVIOUSSONG STOPCD RECORD REWIND PHONE ISO CONFIG HOMEPAGE "
    "REFRESH EXIT MOVE EDIT SCROLLUP SCROLLDOWN KPLEFTPAREN KPRIGHTPAREN NEW REDO "
    "F13 F14 F15 F16 F17 F18 F19 F20 F21 F22 F23 F24"
).split()

_KEYS_FROM_200 = (
    "PLAYCD PAUSECD PROG3 PROG4 DASHBOARD SUSPEND CLOSE PLAY FASTFORWARD BASSBOOST PRINT "
    "HP CAMERA SOUND QUESTION EMAIL CHAT SEARCH CONNECT FINANCE SPORT SHOP ALTERASE "
    "CANCEL BRIGHTNESSDOWN BRIGHTNESSUP MEDIA SWITCHVIDEOMODE KBDILLUMTOGGLE "
    "KBDILLUMDOWN KBDILLUMUP SEND REPLY FORWARDMAIL SAVE DOCUMENTS BATTERY BLUETOOTH "
    "WLAN UWB UNKNOWN VIDEO_NEXT VIDEO_PREV BRIGHTNESS_CYCLE BRIGHTNESS_AUTO "
    "DISPLAY_OFF WWAN RFKILL MICMUTE"
).split()

_BLOCKS = (
    (0x100, "BTN_0 BTN_1 BTN_2 BTN_3 BTN_4 BTN_5 BTN_6 BTN_7 BTN_8 BTN_9"),
    (0x110, "BTN_LEFT BTN_RIGHT BTN_MIDDLE BTN_SIDE BTN_EXTRA BTN_FORWARD BTN_BACK BTN_TASK"),
    (
        0x120,
        "BTN_TRIGGER BTN_THUMB BTN_THUMB2 BTN_TOP BTN_TOP2 BTN_PINKIE BTN_BASE BTN_BASE2 "
        "BTN_BASE3 BTN_BASE4 BTN_BASE5 BTN_BASE6",
    ),
    (0x12F, "BTN_DEAD"),
    (
        0x130,
        "BTN_SOUTH BTN_EAST BTN_C BTN_NORTH BTN_WEST BTN_Z BTN_TL BTN_TR BTN_TL2 BTN_TR2 "
        "BTN_SELECT BTN_START BTN_MODE BTN_THUMBL BTN_THUMBR",
    ),
    (
        0x140,
        "BTN_TOOL_PEN BTN_TOOL_RUBBER BTN_TOOL_BRUSH BTN_TOOL_PENCIL BTN_TOOL_AIRBRUSH "
        "BTN_TOOL_FINGER BTN_TOOL_MOUSE BTN_TOOL_LENS BTN_TOOL_QUINTTAP BTN_STYLUS3 "
        "BTN_TOUCH BTN_STYLUS BTN_STYLUS2 BTN_TOOL_DOUBLETAP BTN_TOOL_TRIPLETAP "
        "BTN_TOOL_QUADTAP",
    ),
    (0x150, "BTN_GEAR_DOWN BTN_GEAR_UP"),
    (
        0x160,
        "KEY_OK KEY_SELECT KEY_GOTO KEY_CLEAR KEY_POWER2 KEY_OPTION KEY_INFO KEY_TIME "
        "KEY_VENDOR KEY_ARCHIVE KEY_PROGRAM KEY_CHANNEL KEY_FAVORITES KEY_EPG KEY_PVR "
        "KEY_MHP KEY_LANGUAGE KEY_TITLE KEY_SUBTITLE KEY_ANGLE KEY_FULL_SCREEN KEY_MODE "
        "KEY_KEYBOARD KEY_ASPECT_RATIO KEY_PC KEY_TV KEY_TV2 KEY_VCR KEY_VCR2 KEY_SAT "
        "KEY_SAT2 KEY_CD KEY_TAPE KEY_RADIO KEY_TUNER KEY_PLAYER KEY_TEXT KEY_DVD KEY_AUX "
        "KEY_MP3 KEY_AUDIO KEY_VIDEO KEY_DIRECTORY KEY_LIST KEY_MEMO KEY_CALENDAR KEY_RED "
        "KEY_GREEN KEY_YELLOW KEY_BLUE KEY_CHANNELUP KEY_CHANNELDOWN",
    ),
    (0x1D0, "KEY_FN"),
    (0x220, "BTN_DPAD_UP BTN_DPAD_DOWN BTN_DPAD_LEFT BTN_DPAD_RIGHT"),
)

# Second names for codes that already carry a name above.
_ALIASES = {
    "BTN_MISC": 0x100,
    "BTN_MOUSE": 0x110,
    "BTN_JOYSTICK": 0x120,
    "BTN_GAMEPAD": 0x130,
    "BTN_A": 0x130,
    "BTN_B": 0x131,
    "BTN_X": 0x133,
    "BTN_Y": 0x134,
    "BTN_DIGI": 0x140,
    "BTN_WHEEL": 0x150,
    "KEY_HANGUEL": 122,
    "KEY_SCREENLOCK": 152,
    "KEY_ZOOM": 0x174,
    "KEY_SCREEN": 0x177,
}


def _build_tables() -> tuple[dict[int, str], dict[str, int]]:
    names: dict[int, str] = {}
    for code, name in enumerate(_MAIN_KEYS):
        names[code] = f"KEY_{name}"
    for code, name in enumerate(_KEYS_FROM_85, start=85):
        names[code] = f"KEY_{name}"
    for code, name in enumerate(_KEYS_FROM_200, start=200):
        names[code] = f"KEY_{name}"
    for start, block in _BLOCKS:
        for code, name in enumerate(block.split(), start=start):
            names[code] = name
    for n in range(1, 41):
        names[0x2C0 + n - 1] = f"BTN_TRIGGER_HAPPY{n}"
    codes = {name: code for code, name in names.items()}
    codes.update(_ALIASES)
    return names, codes


_NAMES_BY_CODE, _CODES_BY_NAME = _build_tables()


@dataclass(frozen=True, order=True)
class Key:
    """A key identified by its scancode."""

    code: int

    @classmethod
    def from_name(cls, name: str) -> Key:
        """Look up a key by its exact scancode name such as ``KEY_A``."""
        try:
            return cls(_CODES_BY_NAME[name])
        except KeyError:
            raise KeyError(name) from None

    @property
    def name(self) -> str:
        return key_name(self.code)

    def __repr__(self) -> str:
        return f"Key({self.name})"


def key_name(code: int) -> str:
    """Return the scancode name of ``code``, or a placeholder for unnamed codes."""
    return _NAMES_BY_CODE.get(code, f"unknown key: {code}")


KEY_RESERVED = Key(0)

# Scancodes for relative events disguised as key events start here.
DISGUISED_EVENT_OFFSETTER = 59974
KEY_MATCH_ANY = Key(DISGUISED_EVENT_OFFSETTER + 26)

_DISGUISED_NAMES = (
    "XRIGHTCURSOR XLEFTCURSOR XDOWNCURSOR XUPCURSOR XREL_Z_AXIS_1 XREL_Z_AXIS_2 "
    "XREL_RX_AXIS_1 XREL_RX_AXIS_2 XREL_RY_AXIS_1 XREL_RY_AXIS_2 XREL_RZ_AXIS_1 "
    "XREL_RZ_AXIS_2 XRIGHTSCROLL XLEFTSCROLL XREL_DIAL_1 XREL_DIAL_2 XUPSCROLL "
    "XDOWNSCROLL XREL_MISC_1 XREL_MISC_2 XREL_RESERVED_1 XREL_RESERVED_2 "
    "XHIRES_UPSCROLL XHIRES_DOWNSCROLL XHIRES_RIGHTSCROLL XHIRES_LEFTSCROLL"
).split()

_CUSTOM_ALIASES: dict[str, Key] = {
    "SHIFT_R": Key.from_name("KEY_RIGHTSHIFT"),
    "SHIFT_L": Key.from_name("KEY_LEFTSHIFT"),
    "CONTROL_R": Key.from_name("KEY_RIGHTCTRL"),
    "CONTROL_L": Key.from_name("KEY_LEFTCTRL"),
    "CTRL_R": Key.from_name("KEY_RIGHTCTRL"),
    "CTRL_L": Key.from_name("KEY_LEFTCTRL"),
    "C_R": Key.from_name("KEY_RIGHTCTRL"),
    "C_L": Key.from_name("KEY_LEFTCTRL"),
    "ALT_R": Key.from_name("KEY_RIGHTALT"),
    "ALT_L": Key.from_name("KEY_LEFTALT"),
    "M_R": Key.from_name("KEY_RIGHTALT"),
    "M_L": Key.from_name("KEY_LEFTALT"),
    "SUPER_R": Key.from_name("KEY_RIGHTMETA"),
    "SUPER_L": Key.from_name("KEY_LEFTMETA"),
    "WIN_R": Key.from_name("KEY_RIGHTMETA"),
    "WIN_L": Key.from_name("KEY_LEFTMETA"),
    **{name: Key(DISGUISED_EVENT_OFFSETTER + i) for i, name in enumerate(_DISGUISED_NAMES)},
    "ANY": KEY_MATCH_ANY,
}


def parse_key(text: str) -> Key:
    """Parse a case-insensitive key name, with or without ``KEY_``, or an alias."""
    name = text.upper()
    for candidate in (name, f"KEY_{name}"):
        if candidate in _CODES_BY_NAME:
            return Key(_CODES_BY_NAME[candidate])
    key = _CUSTOM_ALIASES.get(name)
    if key is None:
        raise ConfigError(f"unknown key '{text}'")
    return key