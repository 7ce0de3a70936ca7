def choose_project_in_console(choices, input_func=None):
    """Numbered-list picker over Choice records for terminals without a display."""
    input_func = input_func or input
    for number, choice in enumerate(choices, 1):
        print(f"{number:4}. {choice.label}")
    while True:
        try:
            answer = input_func("Project number (empty to cancel): ").strip()
        except EOFError:
            return None
        if not answer:
            return None
        if answer.isdigit() and 1 <= int(answer) <= len(choices):
            return choices[int(answer) - 1].project_id
        print(f"[ERROR] Enter a number between 1 and {len(choices)}.")


def ask_text_in_console(prompt, input_func=None):
    input_func = input_func or input
    try:
        return input_func(prompt)
    except EOFError:
        return None
