"""
Keypad layout and key translation for the ProCalc desktop shell
Kept free of tkinter so the layout can be checked without a display.
"""

# (label, button id, kind) rows of the keypad
KEYPAD = [
    [("AC", "ac", "danger"), ("C", "clear", "mode"), ("⌫", "backspace", "mode"), ("÷", "/", "operator")],
    [("7", "7", "normal"), ("8", "8", "normal"), ("9", "9", "normal"), ("×", "*", "operator")],
    [("4", "4", "normal"), ("5", "5", "normal"), ("6", "6", "normal"), ("−", "-", "operator")],
    [("1", "1", "normal"), ("2", "2", "normal"), ("3", "3", "normal"), ("+", "+", "operator")],
    [("±", "negate", "normal"), ("0", "0", "normal"), (".", "dot", "normal"), ("%", "%", "operator")],
]

# Tk keysyms that carry no printable char
KEYSYM_MAP = {
    "Return": "Enter",
    "KP_Enter": "Enter",
    "BackSpace": "Backspace",
    "Escape": "Escape",
}


def translate_key(keysym, char):
    """Map a Tk key event to the calculator's key names"""
    if keysym in KEYSYM_MAP:
        return KEYSYM_MAP[keysym]
    return char or None
