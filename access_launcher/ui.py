import signal

import gi
gi.require_version('Gtk', '3.0')
from gi.repository import Gtk, Gdk

from .categories import CATEGORY_LABELS
from .collector import load_catalog_async
from .launch import LaunchError, launch_entry


class AppLauncher(Gtk.Window):

    def __init__(self, config=None):
        super().__init__(title="Access Launcher")
        self.set_role("access-launcher")
        self.set_default_size(900, 600)

        self.entries = []
        self.category_map = {}
        self.loaded = False

        self.build_ui()
        self.connect("key-press-event", self.on_key_press)

        load_catalog_async(self.on_catalog_loaded, config)


    def build_ui(self):
        self.categories_list = self.build_list_box("Categories list")
        for category in CATEGORY_LABELS:
            row = self.create_text_row(category)
            row.category_name = category
            self.categories_list.add(row)
        self.categories_list.connect("row-selected", self.on_category_selected)

        self.programs_list = self.build_list_box("Programs list")
        self.programs_list.add(self.create_text_row("Loading..."))
        self.programs_list.connect("row-activated", self.on_program_activated)

        paned = Gtk.Paned(orientation=Gtk.Orientation.HORIZONTAL)
        paned.pack1(self.build_pane("Categories", self.categories_list), True, False)
        paned.pack2(self.build_pane("Programs", self.programs_list), True, False)
        paned.set_wide_handle(True)
        self.add(paned)


    def build_list_box(self, accessible_name):
        listbox = Gtk.ListBox()
        listbox.set_selection_mode(Gtk.SelectionMode.SINGLE)
        listbox.set_can_focus(True)
        self.set_margins(listbox, 6)
        accessible = listbox.get_accessible()
        accessible.set_name(accessible_name)
        accessible.set_description("Use arrow keys to browse items.")
        return listbox


    def build_pane(self, title, listbox):
        vbox = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=6)
        self.set_margins(vbox, 12)

        header = Gtk.Label(label=title)
        header.set_xalign(0.0)
        header.set_margin_bottom(6)
        vbox.pack_start(header, False, False, 0)

        scrolled = Gtk.ScrolledWindow()
        scrolled.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)
        scrolled.set_hexpand(True)
        scrolled.set_vexpand(True)
        scrolled.add(listbox)
        vbox.pack_start(scrolled, True, True, 0)
        return vbox


    @staticmethod
    def set_margins(widget, margin):
        widget.set_margin_top(margin)
        widget.set_margin_bottom(margin)
        widget.set_margin_start(margin)
        widget.set_margin_end(margin)


    def create_text_row(self, text):
        row = Gtk.ListBoxRow()
        label = Gtk.Label(label=text)
        label.set_xalign(0.0)
        self.set_margins(label, 6)
        row.add(label)
        row.get_accessible().set_name(text)
        return row


    def create_program_row(self, entry):
        row = Gtk.ListBoxRow()
        row.desktop_path = str(entry.path)

        label = Gtk.Label(label=entry.name)
        label.set_xalign(0.0)
        label.set_ellipsize(3)
        label.set_tooltip_text(entry.exec)
        self.set_margins(label, 6)
        row.add(label)

        accessible = row.get_accessible()
        accessible.set_name(entry.name)
        accessible.set_description(entry.exec)
        return row


    def on_catalog_loaded(self, entries, category_map):
        self.entries = entries
        self.category_map = category_map

        row = self.categories_list.get_selected_row() or self.categories_list.get_row_at_index(0)
        self.categories_list.select_row(row)
        self.loaded = True
        self.show_category(row.category_name)
        return False


    def show_category(self, category):
        """Fill the programs pane with the entries of one bucket"""
        for child in self.programs_list.get_children():
            self.programs_list.remove(child)

        indices = self.category_map.get(category, [])
        if not indices:
            self.programs_list.add(self.create_text_row("No applications found"))

        for index in indices:
            if index < len(self.entries):
                self.programs_list.add(self.create_program_row(self.entries[index]))

        self.programs_list.show_all()


    def on_category_selected(self, listbox, row):
        if row is not None and self.loaded:
            self.show_category(row.category_name)


    def on_program_activated(self, listbox, row):
        path = getattr(row, 'desktop_path', None)
        if not path:
            return
        context = self.get_display().get_app_launch_context()
        try:
            launch_entry(path, context)
        except LaunchError as e:
            self.show_error_dialog(e.title, e.details)


    def show_error_dialog(self, title, details):
        dialog = Gtk.MessageDialog(
            transient_for=self,
            modal=True,
            destroy_with_parent=True,
            message_type=Gtk.MessageType.ERROR,
            buttons=Gtk.ButtonsType.CLOSE,
            text=title,
        )
        dialog.format_secondary_text(details)
        dialog.connect("response", lambda d, _response: d.destroy())
        dialog.show()


    def on_key_press(self, widget, event):
        if event.keyval == Gdk.KEY_Escape:
            self.destroy()
            return True
        return False


def run(config=None):
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    win = AppLauncher(config)
    win.connect("destroy", Gtk.main_quit)
    win.show_all()
    win.maximize()
    win.categories_list.grab_focus()
    Gtk.main()
