def match_project(choices, query):
    """
    Resolve a --project argument against the picker's Choice records.
    Returns the project id, or None when nothing (or more than one project) matches.
    """
    # Priority 1: exact project id
    for choice in choices:
        if choice.project_id == query:
            return choice.project_id

    wanted = query.strip().lower()

    # Priority 2: full label as shown in the picker, "Client - Project"
    for choice in choices:
        if choice.label.lower() == wanted:
            return choice.project_id

    # Priority 3: bare project name, only when it is unambiguous
    matches = [choice.project_id for choice in choices
               if choice.project.name.lower() == wanted]
    if len(matches) == 1:
        return matches[0]

    return None
