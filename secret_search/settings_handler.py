import json
from .inpututil import get_input, comma_list, RANGE_INCLUSIVE, ANY_VALUE

SETTINGS_FILE = "settings.json"

DEFAULT_SETTINGS = {
    "testCaseFiles": ["testcase1.json", "testcase2.json"],
    "arithmetic": "exact",
    "strictDigits": "no",
    "showParsedPoints": "yes",
    "combinationWarningThreshold": 100000,
}

# allowed type and values for each setting
ALLOWED_VALUES = {
    "testCaseFiles": (comma_list, ANY_VALUE()),
    "arithmetic": (str, ("exact", "float")),
    "strictDigits": (str, ("yes", "no")),
    "showParsedPoints": (str, ("yes", "no")),
    "combinationWarningThreshold": (int, RANGE_INCLUSIVE(0)),
}


def get_settings():
    """
    settings from SETTINGS_FILE, with defaults filled in for anything missing.
    a missing file just means all defaults
    """
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(SETTINGS_FILE, "r") as f:
            saved = json.load(f)
    except FileNotFoundError:
        return settings

    if not isinstance(saved, dict):
        raise ValueError(f"{SETTINGS_FILE} must contain a JSON object")
    settings.update(saved)

    for key, value in settings.items():
        if key in ALLOWED_VALUES and not is_allowed(key, value):
            raise ValueError(f"Invalid setting value for {key}: {value}. Allowed: {ALLOWED_VALUES[key][1]}")
    return settings


def is_allowed(key, value):
    value_type, allowed_value_range = ALLOWED_VALUES[key]
    if value_type is comma_list:
        return isinstance(value, list) and all(isinstance(v, str) for v in value)
    return isinstance(value, value_type) and value in allowed_value_range


def setting_is_yes(settings, key):
    return settings.get(key, DEFAULT_SETTINGS[key]) == "yes"


def save_settings(settings):
    with open(SETTINGS_FILE, "w") as f:
        json.dump(settings, f, indent=4)


def change_settings():
    settings = get_settings()

    keys = list(settings.keys())

    # print settings
    print("Settings:")
    for idx, key in enumerate(keys):
        print(f"[{idx}] {key}: {settings[key]}")

    choice = get_input("Select a setting to change (number)\n> ", int, range(len(settings)))

    key = keys[choice]
    if key not in ALLOWED_VALUES:
        print(f"'{key}' is not a known setting and cannot be changed here.")
        return
    value_type, allowed_value_range = ALLOWED_VALUES[key]

    print(f"Current value: {settings[key]}")
    if value_type is comma_list:
        print("Allowed values: comma separated file names")
    else:
        print(f"Allowed values: {allowed_value_range}")
    new_value = get_input(f"Enter new value for '{key}'\n> ", value_type, allowed_value_range)
    settings[key] = new_value

    save_settings(settings)
    print("Settings updated.")


def reset_settings():
    save_settings(dict(DEFAULT_SETTINGS))
    print("Settings reset to default values.")
