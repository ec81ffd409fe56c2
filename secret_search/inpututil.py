def get_input(prompt, target_type = str, allowed_range = None, strip_whitespace=True):
    """
    variation of input() with type casting and validation. keeps asking until the input is valid.
        target_type: type (or any callable raising ValueError) used to convert the input, e.g int, str, comma_list
        allowed_range: optional collection of valid values. must support membership testing (e.g range, tuple, RANGE_INCLUSIVE)
    """
    if not callable(target_type):
        raise TypeError("target_type must be a type like int or str, or a conversion function")

    if allowed_range is not None and not hasattr(allowed_range, '__contains__'):
        raise TypeError("allowed_range must support membership testing (e.g., list, range). Currently: " + str(type(allowed_range)))

    type_name = getattr(target_type, "__name__", "value")
    while True:
        inp = input(prompt)
        if strip_whitespace:
            inp = inp.strip()
        try:
            casted_input = target_type(inp)
        except ValueError as e:
            print(f"Input must be of type {type_name}. Error: {e}")
            continue

        if allowed_range is not None and casted_input not in allowed_range:
            print(f"Input must be within {allowed_range}")
        else:
            return casted_input


def choose_option(options: dict, text1="Select an option", inp_type=str):
    """
    prints each option as "[key] description" and returns the chosen key
    e.g choose_option({"s": "Solve", "q": "Quit"}) -> "s"
    """
    print(text1)
    for key, description in options.items():
        print(f"[{key}] {description}")
    return get_input("> ", inp_type, tuple(options.keys()))


def comma_list(inp: str) -> list[str]:
    # "a.json, b.json" -> ["a.json", "b.json"]
    items = [item.strip() for item in inp.split(",") if item.strip()]
    if not items:
        raise ValueError("expected at least one comma separated item")
    return items


# helper classes to use for allowed_range

# e.g get_input("Enter a non-negative integer: ", int, RANGE_INCLUSIVE(0))
class RANGE_INCLUSIVE():
    # like range() but inclusive of end, and allows None for -inf or inf
    def __init__(self, start, end=None):
        self.start = start
        self.end = end

    def __contains__(self, item):
        return (self.start is None or item >= self.start) and (self.end is None or item <= self.end)

    def __repr__(self):
        start = "-inf" if self.start is None else self.start
        end = "inf" if self.end is None else self.end
        return f"RANGE_INCLUSIVE({start}, {end})"


# accepts anything, for settings whose type conversion already validates
class ANY_VALUE():
    def __contains__(self, item):
        return True

    def __repr__(self):
        return "any value"
