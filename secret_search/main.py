import sys
from pathlib import Path
from .inpututil import choose_option
from .settings_handler import get_settings, change_settings, reset_settings, setting_is_yes
from .solver import solve_test_cases
from .subset_search import combination_count


"""
reads test case files, prints the decoded points and the majority secret of each.
a test case that fails (bad file, bad digits, too few points, ...) is reported and the rest still run
"""


def report_parsed(settings):
    # returns the on_parsed callback for solve_test_cases
    def on_parsed(name, point_set):
        if setting_is_yes(settings, "showParsedPoints"):
            bases = point_set.bases or (None,) * point_set.n
            for p, base in zip(point_set, bases):
                suffix = f" (base {base})" if base is not None else ""
                print(f"Parsed: x = {p.x}, y = {p.y}{suffix}")

        if point_set.declared_n is not None and point_set.declared_n != point_set.n:
            print(f"Note: {name} declares n = {point_set.declared_n} but has {point_set.n} points")

        threshold = settings.get("combinationWarningThreshold", 0)
        if point_set.n >= point_set.k >= 1:
            count = combination_count(point_set.n, point_set.k)
            if count > threshold:
                print(f"Warning: {count} subsets to interpolate for {name} (n = {point_set.n}, k = {point_set.k}), this may take a long time. Ctrl+C to stop.")
    return on_parsed


def run_test_cases(paths, settings=None):
    """
    solves and prints each test case. returns True if every case produced a secret
    """
    if settings is None:
        settings = get_settings()

    all_ok = True
    for path in paths:
        # one at a time so the parsed points print under their own heading
        print(f"\n----- {Path(path).name} -----")
        [result] = solve_test_cases([path],
                                    exact=settings.get("arithmetic", "exact") == "exact",
                                    strict_digits=setting_is_yes(settings, "strictDigits"),
                                    on_parsed=report_parsed(settings))
        if result.ok:
            print(f"Secret for {result.name}: {result.secret}")
        else:
            all_ok = False
            print(f"No secret could be determined for {result.name}: {result.error}")
    return all_ok


def main_menu():
    while True:
        match choose_option({
            "s": "Solve test cases from settings",
            "c": "Change settings",
            "r": "Reset settings",
            "q": "Quit"
        }):
            case "s":
                settings = get_settings()
                run_test_cases(settings["testCaseFiles"], settings)
            case "c":
                change_settings()
            case "r":
                reset_settings()
            case "q":
                print("Exiting...")
                return


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    try:
        if argv:
            return 0 if run_test_cases(argv) else 1
        main_menu()
        return 0
    except KeyboardInterrupt:
        print("\nInterrupted, stopping.")
        return 130
    except ValueError as e:
        # broken settings file
        print(f"Error: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
