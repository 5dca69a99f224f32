"""Tkinter main window and settings dialog."""

import logging
import tkinter as tk
from tkinter import messagebox

from labelmaker.config import get_settings
from labelmaker.connection import ConnectionSettings
from labelmaker.service import PrintService

logger = logging.getLogger(__name__)

QUANTITIES = (1, 2, 3)
DEFAULT_QTY = 1


class SettingsDialog:
    """Modal dialog for the endpoint, auth token and history reset."""

    def __init__(self, parent: tk.Misc, service: PrintService, on_history_cleared=None):
        """Initialize the settings dialog.

        Args:
            parent: Owning window.
            service: Print service whose settings and history are edited.
            on_history_cleared: Called with the status message after a reset.
        """
        self.parent = parent
        self.service = service
        self.on_history_cleared = on_history_cleared

    def show(self) -> None:
        """Show the dialog and block until it is closed."""
        settings = self.service.settings_store.load()

        self.top = tk.Toplevel(self.parent)
        self.top.title("Settings")
        self.top.resizable(False, False)
        self.top.transient(self.parent)

        frame = tk.Frame(self.top, padx=20, pady=20)
        frame.pack(fill=tk.BOTH, expand=True)

        tk.Label(frame, text="Label printer endpoint:", anchor="w").pack(fill=tk.X)
        self.endpoint_var = tk.StringVar(value=settings.endpoint)
        tk.Entry(frame, textvariable=self.endpoint_var, width=45).pack(fill=tk.X, pady=(2, 10))

        tk.Label(frame, text="Auth token:", anchor="w").pack(fill=tk.X)
        self.token_var = tk.StringVar(value=settings.auth_token)
        tk.Entry(frame, textvariable=self.token_var, width=45, show="*").pack(
            fill=tk.X, pady=(2, 15)
        )

        has_history = bool(self.service.history.get_all())
        tk.Button(
            frame,
            text="Reset history",
            command=self._on_reset_history,
            state=tk.NORMAL if has_history else tk.DISABLED,
        ).pack(anchor="w", pady=(0, 15))

        btn_frame = tk.Frame(frame)
        btn_frame.pack(fill=tk.X)

        tk.Button(
            btn_frame,
            text="Save",
            command=self._on_save,
            width=12,
            bg="#2563eb",
            fg="white",
        ).pack(side=tk.RIGHT, padx=(5, 0))
        tk.Button(btn_frame, text="Cancel", command=self.top.destroy, width=10).pack(
            side=tk.RIGHT
        )

        self.top.grab_set()
        self.parent.wait_window(self.top)

    def _on_save(self):
        self.service.settings_store.save(
            ConnectionSettings(
                endpoint=self.endpoint_var.get().strip(),
                auth_token=self.token_var.get().strip(),
            )
        )
        logger.info("Connection settings saved")
        self.top.destroy()

    def _on_reset_history(self):
        confirmed = messagebox.askyesno(
            "Confirm deletion",
            "This will permanently delete all saved labels. Continue?",
            parent=self.top,
        )
        if not confirmed:
            return

        message = self.service.clear_history()
        if self.on_history_cleared:
            self.on_history_cleared(message)
        self.top.destroy()


class LabelMakerWindow:
    """Main window: label text, copies, print button and history list."""

    def __init__(self, service: PrintService):
        self.service = service

    def show(self) -> None:
        """Show the window and block until it is closed."""
        self.root = tk.Tk()
        self.root.title(get_settings().app_name)
        self.root.minsize(420, 360)

        self._build_ui()
        self._refresh_history()

        if not self.service.settings_store.load().is_configured():
            self.root.after(100, self._open_settings)

        self.root.mainloop()

    def _build_ui(self):
        frame = tk.Frame(self.root, padx=20, pady=20)
        frame.pack(fill=tk.BOTH, expand=True)

        header = tk.Frame(frame)
        header.pack(fill=tk.X, pady=(0, 10))
        tk.Label(header, text=get_settings().app_name, font=("", 16, "bold")).pack(side=tk.LEFT)
        tk.Button(header, text="Settings", command=self._open_settings).pack(side=tk.RIGHT)

        tk.Label(frame, text="Label text:", anchor="w").pack(fill=tk.X)
        self.text_var = tk.StringVar()
        entry = tk.Entry(frame, textvariable=self.text_var, font=("", 14))
        entry.pack(fill=tk.X, pady=(2, 10))
        entry.bind("<Return>", lambda _event: self._on_print())

        qty_frame = tk.Frame(frame)
        qty_frame.pack(fill=tk.X, pady=(0, 10))
        tk.Label(qty_frame, text="Copies:").pack(side=tk.LEFT)
        self.qty_var = tk.IntVar(value=DEFAULT_QTY)
        for qty in QUANTITIES:
            tk.Radiobutton(qty_frame, text=str(qty), variable=self.qty_var, value=qty).pack(
                side=tk.LEFT
            )

        btn_frame = tk.Frame(frame)
        btn_frame.pack(fill=tk.X, pady=(0, 10))

        self.print_btn = tk.Button(
            btn_frame,
            text="Print",
            command=self._on_print,
            width=15,
            bg="#2563eb",
            fg="white",
        )
        self.print_btn.pack(side=tk.RIGHT, padx=(5, 0))
        tk.Button(btn_frame, text="Clear", command=self._on_clear, width=10).pack(side=tk.RIGHT)

        tk.Label(frame, text="History:", anchor="w").pack(fill=tk.X)
        self.history_list = tk.Listbox(frame, height=10, activestyle="none")
        self.history_list.pack(fill=tk.BOTH, expand=True, pady=(2, 10))
        self.history_list.bind("<<ListboxSelect>>", self._on_history_select)

        self.status_var = tk.StringVar(value="")
        self.status_label = tk.Label(frame, textvariable=self.status_var, fg="gray", anchor="w")
        self.status_label.pack(fill=tk.X)

    def _refresh_history(self):
        self.history_list.delete(0, tk.END)
        for item in self.service.history.get_all():
            self.history_list.insert(tk.END, item)

    def _on_history_select(self, _event):
        selection = self.history_list.curselection()
        if selection:
            self.text_var.set(self.history_list.get(selection[0]))

    def _on_print(self):
        """Handle print button click."""
        # Enter key still fires while a submission is in flight
        if str(self.print_btn["state"]) == tk.DISABLED:
            return

        text = self.text_var.get()

        self.print_btn.config(state=tk.DISABLED)
        self.status_var.set("Printing...")
        self.status_label.config(fg="gray")

        # Run submission in background thread to avoid blocking UI
        self.service.submit_in_background(
            text,
            self.qty_var.get(),
            lambda message: self.root.after(0, self._on_print_done, message),
        )

    def _on_print_done(self, message: str):
        self.status_var.set(message)
        self.print_btn.config(state=tk.NORMAL)
        self._refresh_history()

    def _on_clear(self):
        self.text_var.set("")
        self.qty_var.set(DEFAULT_QTY)

    def _on_history_cleared(self, message: str):
        self.status_var.set(message)
        self._refresh_history()

    def _open_settings(self):
        SettingsDialog(self.root, self.service, self._on_history_cleared).show()
