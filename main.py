import os
import sys
import argparse
import yaml
from dotenv import load_dotenv
from clockify_client import ClockifyClient
from console_prompt import ask_text_in_console, choose_project_in_console
from matcher import match_project
from timer_actions import project_label, start_timer, stop_timer

DEFAULT_CONFIG_FILE = "clockify.yaml"
TRUE_VALUES = ("1", "true", "yes", "on")

class ConfigError(Exception):
    pass

def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="clockify-timer", description="Start and stop Clockify timers.")
    parser.add_argument("--config", type=str, default=DEFAULT_CONFIG_FILE, help="YAML settings file (default: clockify.yaml)")
    parser.add_argument("--debug", action="store_true", help="Trace outgoing requests, payloads and page fetches")
    subparsers = parser.add_subparsers(dest="command", required=True)

    start = subparsers.add_parser("start", help="Pick a project and start a timer")
    start.add_argument("--project", type=str, help="Project id, name or 'Client - Project' label")
    start.add_argument("--description", type=str, help="Time entry description")
    start.add_argument("--console", action="store_true", help="Prompt in the terminal instead of a dialog")

    subparsers.add_parser("stop", help="Stop the running timer")
    subparsers.add_parser("projects", help="List the workspace's projects")
    return parser.parse_args(argv)

def load_config(path=DEFAULT_CONFIG_FILE, require_user_id=False):
    load_dotenv()
    settings = {}
    if os.path.exists(path):
        try:
            with open(path, "r") as f:
                settings = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"[ERROR] Failed to load {path}: {e}")
        if settings is None:
            settings = {}
        if not isinstance(settings, dict):
            raise ConfigError(f"[ERROR] {path} must be a mapping of settings. Please check its contents.")
    elif path != DEFAULT_CONFIG_FILE:
        raise ConfigError(f"[ERROR] Config file '{path}' does not exist.")

    # Environment variables win over the settings file
    env_vars = [
        ("CLOCKIFY_API_KEY", "api_key", "Clockify API key (set CLOCKIFY_API_KEY)", True),
        ("CLOCKIFY_WORKSPACE_ID", "workspace_id", "Clockify workspace ID (set CLOCKIFY_WORKSPACE_ID)", True),
        ("CLOCKIFY_USER_ID", "user_id", "Clockify user ID (set CLOCKIFY_USER_ID)", require_user_id),
    ]
    config = {}
    for var, key, hint, required in env_vars:
        value = os.getenv(var) or settings.get(key)
        if required and not value:
            raise ConfigError(f"[ERROR] Missing setting: {var}. Hint: {hint}")
        if value is not None and not isinstance(value, str):
            raise ConfigError(f"[ERROR] '{key}' in {path} must be a string.")
        config[key] = value

    debug = os.getenv("CLOCKIFY_DEBUG")
    if debug is None:
        debug = settings.get("debug", False)
    if isinstance(debug, str):
        debug = debug.strip().lower() in TRUE_VALUES
    config["debug"] = bool(debug)
    config["error_log"] = os.getenv("CLOCKIFY_ERROR_LOG") or settings.get("error_log")
    return config

def log_error(msg, path=None):
    print(msg)
    if path:
        with open(path, "a") as f:
            f.write(msg + "\n")

def get_prompts(args):
    choose, read_text = choose_project_in_console, ask_text_in_console
    if not args.console and not (args.project and args.description is not None):
        # tkinter is only imported when a dialog will actually be shown
        from ui_dialog import ask_text_via_dialog, choose_project_via_dialog
        choose, read_text = choose_project_via_dialog, ask_text_via_dialog

    if args.project:
        def choose(choices, query=args.project):
            project_id = match_project(choices, query)
            if project_id is None:
                print(f"[WARNING] No Clockify project found for '{query}'.")
            return project_id

    if args.description is not None:
        def read_text(prompt, description=args.description):
            return description

    return choose, read_text

def run_projects(client):
    result = client.list_projects()
    if not result.ok:
        return result
    print(f"{'Project':50} | ID")
    print("-" * 80)
    for project in result.value:
        print(f"{project_label(project)[:50]:50} | {project.id}")
    return result

def main(argv=None):
    try:
        args = parse_args(argv)
        config = load_config(args.config, require_user_id=args.command == "stop")
    except ConfigError as e:
        print(e)
        return 1
    client = ClockifyClient(
        config["api_key"],
        config["workspace_id"],
        user_id=config["user_id"],
        debug=args.debug or config["debug"]
    )

    if args.command == "start":
        choose, read_text = get_prompts(args)
        result = start_timer(client, choose, read_text)
    elif args.command == "stop":
        result = stop_timer(client)
    else:
        result = run_projects(client)

    if not result.ok:
        log_error(f"[ERROR] '{args.command}' failed: {result.error}", config["error_log"])
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
