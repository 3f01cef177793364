"""Landing page designer - NiceGUI page component."""

from typing import Any

from nicegui import context, ui
from nicegui.events import GenericEventArguments

from pageforge.editor import DesignerSession, session_manager
from pageforge.palette import PALETTE
from pageforge.properties import FieldKind, PropertyField
from pageforge.rendering import element_stylesheet
from pageforge.services import get_gateway, get_media_directory

# Reports the pointer in canvas coordinates plus the handle/element under it
POINTER_JS = """(e) => {
    const r = e.currentTarget.getBoundingClientRect();
    const handle = e.target.closest('[data-action]');
    const box = e.target.closest('[data-element-id]');
    emit({
        x: e.clientX - r.left,
        y: e.clientY - r.top,
        action: handle ? handle.dataset.action : null,
        elementId: box ? box.dataset.elementId : null,
    });
}"""


class LandingPageDesigner:
    """
    Designer UI of one browser tab.

    Layout: header (album, title, save/publish/preview), palette on the left,
    canvas in the middle, properties of the selected element on the right.
    All state lives in the DesignerSession; this class only forwards input
    and re-renders.
    """

    def __init__(self, user_id: str | None = None):
        client = context.client
        self.session: DesignerSession = session_manager.register(
            client.id,
            get_gateway(),
            get_media_directory(),
            notify=lambda message, type: ui.notify(message, type=type),
            user_id=user_id,
        )
        client.on_disconnect(lambda: session_manager.unregister(client.id))
        self.canvas = None

    async def build(self) -> None:
        ui.add_head_html(f"<style>{element_stylesheet()}</style>")
        await self.session.load_albums()

        with ui.header().classes("items-center gap-4 bg-white text-black shadow"):
            ui.label("Landing Page Designer").classes("text-lg font-semibold")
            ui.select(
                {album.id: album.title for album in self.session.albums},
                label="Album",
                on_change=self._on_album_change,
            ).classes("w-64")
            self.toolbar()

        with ui.row().classes("w-full no-wrap items-start gap-4 p-4"):
            with ui.column().classes("w-56"):
                self.palette()
                self.theme_panel()
            with ui.column().classes("grow"):
                with ui.element("div").classes("w-full border rounded") as container:
                    self.canvas = ui.html(self.session.render_canvas(), sanitize=False).classes("w-full")
                container.on("mousedown", self._on_pointer_down, js_handler=POINTER_JS)
                container.on("mousemove", self._on_pointer_move, js_handler=POINTER_JS, throttle=0.02)
                container.on("mouseup", self._on_pointer_up, js_handler=POINTER_JS)
                container.on("mouseleave", self._on_pointer_up, js_handler=POINTER_JS)
            with ui.column().classes("w-72"):
                self.properties_panel()

    # --- Rendering ---

    def redraw(self) -> None:
        if self.canvas is not None:
            self.canvas.content = self.session.render_canvas()

    def refresh_all(self) -> None:
        self.redraw()
        self.toolbar.refresh()
        self.theme_panel.refresh()
        self.properties_panel.refresh()

    @ui.refreshable_method
    def toolbar(self) -> None:
        document = self.session.document
        ui.input(
            "Title",
            value=document.title if document else "",
            on_change=lambda e: self._on_title_change(e.value),
        ).props("dense").classes("w-72").set_enabled(document is not None)

        ui.space()
        ui.button("Save", icon="save", on_click=self._on_save).set_enabled(document is not None)
        published = bool(document and document.is_published)
        ui.button(
            "Unpublish" if published else "Publish",
            icon="public_off" if published else "public",
            on_click=self._on_toggle_publish,
        ).set_enabled(document is not None)
        url = self.session.preview_url()
        if url and published:
            ui.button("Preview", icon="open_in_new", on_click=lambda: ui.navigate.to(url, new_tab=True))

    def palette(self) -> None:
        ui.label("Elements").classes("text-sm font-semibold")
        for entry in PALETTE:
            with ui.card().classes("w-full cursor-pointer p-2").on(
                "click", lambda _, t=entry.element_type: self._on_add(t)
            ):
                with ui.row().classes("items-center no-wrap"):
                    ui.icon(entry.icon)
                    with ui.column().classes("gap-0"):
                        ui.label(entry.label).classes("font-medium")
                        ui.label(entry.description).classes("text-xs text-gray-500")

    @ui.refreshable_method
    def theme_panel(self) -> None:
        document = self.session.document
        if document is None:
            return
        ui.label("Theme").classes("text-sm font-semibold")
        for key, label in (
            ("background_color", "Background"),
            ("text_color", "Text"),
            ("accent_color", "Accent"),
        ):
            ui.color_input(
                label,
                value=getattr(document.theme, key),
                on_change=lambda e, k=key: self._on_theme_change(k, e.value),
            ).classes("w-full")

    @ui.refreshable_method
    def properties_panel(self) -> None:
        element = self.session.selected_element()
        if element is None:
            ui.label("Select an element to edit its properties").classes("text-sm text-gray-500")
            return

        ui.label(element.element_type.replace("_", " ").title()).classes("font-semibold")
        fields = self.session.property_fields()
        if not fields and not element.is_known:
            ui.label("This element type is not supported by this editor").classes("text-sm")
        for field in fields:
            self._property_input(element.id, field)

        with ui.row().classes("no-wrap"):
            ui.number("Width", value=element.size.width, min=1,
                      on_change=lambda e: self._on_size(element.id, width=e.value))
            ui.number("Height", value=element.size.height, min=1,
                      on_change=lambda e: self._on_size(element.id, height=e.value))
        ui.button("Delete", icon="delete", color="negative",
                  on_click=lambda: self._on_delete(element.id))

    def _property_input(self, element_id: str, field: PropertyField) -> None:
        def on_change(e: Any) -> None:
            if self.session.change_property(element_id, field.key, e.value):
                self.redraw()

        if field.is_empty_picker:
            ui.label(field.empty_message).classes("text-sm text-gray-500")
        elif field.kind == FieldKind.SELECT:
            ui.select({o.value: o.label for o in field.options}, label=field.label,
                      value=field.value or None, on_change=on_change).classes("w-full")
        elif field.kind == FieldKind.NUMBER:
            ui.number(field.label, value=field.value, on_change=on_change).classes("w-full")
        elif field.kind == FieldKind.TEXTAREA:
            ui.textarea(field.label, value=field.value, placeholder=field.placeholder,
                        on_change=on_change).classes("w-full")
        else:
            ui.input(field.label, value=field.value, placeholder=field.placeholder,
                     on_change=on_change).classes("w-full")

    # --- Event handlers ---

    async def _on_album_change(self, e: Any) -> None:
        if e.value and await self.session.select_album(e.value):
            self.refresh_all()

    def _on_title_change(self, title: str) -> None:
        self.session.set_title(title)

    def _on_theme_change(self, key: str, color: str) -> None:
        if color and self.session.set_theme(**{key: color}):
            self.redraw()

    def _on_add(self, element_type: str) -> None:
        if self.session.document is None:
            ui.notify("Please select an album first", type="warning")
            return
        self.session.add_element(element_type)
        self.redraw()
        self.properties_panel.refresh()

    def _on_delete(self, element_id: str) -> None:
        self.session.delete_element(element_id)
        self.redraw()
        self.properties_panel.refresh()

    def _on_size(self, element_id: str, width: float | None = None, height: float | None = None) -> None:
        if self.session.change_size(element_id, width=width, height=height):
            self.redraw()

    async def _on_save(self) -> None:
        if await self.session.save():
            self.toolbar.refresh()

    async def _on_toggle_publish(self) -> None:
        if self.session.document is not None and await self.session.toggle_publish():
            self.toolbar.refresh()

    def _on_pointer_down(self, e: GenericEventArguments) -> None:
        if self.session.document is None:
            return
        args = e.args
        action = args.get("action")
        if action == "delete":
            self._on_delete(args["elementId"])
            return
        if action == "properties":
            self.session.engine.select(args["elementId"])
        elif action == "move":
            self.session.engine.pointer_down(args["x"], args["y"], element_id=args["elementId"])
        else:
            self.session.engine.pointer_down(args["x"], args["y"])
        self.redraw()
        self.properties_panel.refresh()

    def _on_pointer_move(self, e: GenericEventArguments) -> None:
        if self.session.engine.listeners.dispatch("move", e.args["x"], e.args["y"]):
            self.redraw()

    def _on_pointer_up(self, e: GenericEventArguments) -> None:
        if self.session.engine.listeners.dispatch("up", e.args["x"], e.args["y"]):
            self.properties_panel.refresh()
