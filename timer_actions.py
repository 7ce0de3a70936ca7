from collections import namedtuple
from datetime import datetime, timezone

from clockify_client import ClockifyError, NO_RESPONSE, Result

DESCRIPTION_PROMPT = "Description: "

Choice = namedtuple("Choice", ["label", "project_id", "project"])


def utc_timestamp(now=None):
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def project_label(project):
    if project.client_name:
        return f"{project.client_name} - {project.name}"
    return project.name


def start_timer(client, choose_project, read_description, now=None):
    """
    Let the user pick a project and a description, then start a time entry.

    ``choose_project`` receives ``Choice`` records and returns the
    chosen id; ``read_description`` receives a prompt. Either returning None
    cancels the action without touching the API.
    """
    projects = client.list_projects()
    if not projects.ok:
        return projects
    if not projects.value:
        error = ClockifyError(NO_RESPONSE, "No projects found in workspace")
        print(f"[WARNING] {error}")
        return Result(error=error)

    choices = [Choice(project_label(p), p.id, p) for p in projects.value]
    project_id = choose_project(choices)
    if project_id is None:
        print("[INFO] Project selection cancelled.")
        return Result()

    description = read_description(DESCRIPTION_PROMPT)
    if description is None:
        print("[INFO] Description input cancelled.")
        return Result()

    result = client.start_time_entry(project_id, description, utc_timestamp(now))
    if result.ok:
        print(f"[INFO] Timer started: {description}")
    return result


def stop_timer(client, now=None):
    result = client.stop_time_entry(utc_timestamp(now))
    if result.ok:
        print("[INFO] Timer stopped.")
    return result
