import tkinter as tk
from tkinter import ttk
from tkinter import messagebox


def _run_dialog(dialog_class, *args):
    root = tk.Tk()
    root.withdraw()
    dialog = dialog_class(root, *args)
    root.wait_window(dialog.top)
    root.destroy()
    return dialog.result


def choose_project_via_dialog(choices):
    """Show a picker over Choice records; returns the chosen project id or None."""
    class ProjectDialog:
        def __init__(self, parent, choices):
            self.result = None
            self.choices = choices
            self.top = tk.Toplevel(parent)
            self.top.title("Start Clockify timer")
            self.top.grab_set()
            self.top.protocol("WM_DELETE_WINDOW", self.cancel)
            ttk.Label(self.top, text="Project:").grid(row=0, column=0, padx=5, pady=5, sticky="e")
            self.combo = ttk.Combobox(self.top, width=50, state="readonly",
                                      values=[choice.label for choice in choices])
            self.combo.current(0)
            self.combo.grid(row=0, column=1, padx=5, pady=5)
            self.combo.focus_set()
            btn_frame = ttk.Frame(self.top)
            btn_frame.grid(row=1, column=0, columnspan=2, pady=10)
            ttk.Button(btn_frame, text="OK", command=self.ok).pack(side="left", padx=5)
            ttk.Button(btn_frame, text="Cancel", command=self.cancel).pack(side="left", padx=5)
            self.top.bind('<Return>', lambda event: self.ok())
            self.top.bind('<Escape>', lambda event: self.cancel())
        def ok(self):
            index = self.combo.current()
            if index < 0:
                messagebox.showerror("Input Error", "Please select a project.")
                return
            self.result = self.choices[index].project_id
            self.top.destroy()
        def cancel(self):
            self.result = None
            self.top.destroy()
    return _run_dialog(ProjectDialog, choices)


def ask_text_via_dialog(prompt):
    class TextDialog:
        def __init__(self, parent, prompt):
            self.result = None
            self.top = tk.Toplevel(parent)
            self.top.title("Start Clockify timer")
            self.top.grab_set()
            self.top.protocol("WM_DELETE_WINDOW", self.cancel)
            ttk.Label(self.top, text=prompt).grid(row=0, column=0, padx=5, pady=5, sticky="e")
            self.entry_var = tk.StringVar()
            entry = ttk.Entry(self.top, width=50, textvariable=self.entry_var)
            entry.grid(row=0, column=1, padx=5, pady=5)
            entry.focus_set()
            btn_frame = ttk.Frame(self.top)
            btn_frame.grid(row=1, column=0, columnspan=2, pady=10)
            ttk.Button(btn_frame, text="OK", command=self.ok).pack(side="left", padx=5)
            ttk.Button(btn_frame, text="Cancel", command=self.cancel).pack(side="left", padx=5)
            self.top.bind('<Return>', lambda event: self.ok())
            self.top.bind('<Escape>', lambda event: self.cancel())
        def ok(self):
            self.result = self.entry_var.get()
            self.top.destroy()
        def cancel(self):
            self.result = None
            self.top.destroy()
    return _run_dialog(TextDialog, prompt)
