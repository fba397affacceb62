"""NiceGUI frontend for the photo gallery."""

from nicegui import ui

from gallery.infrastructure.http.http_photo_store import HttpPhotoStore
from gallery.models.photo import Photo
from gallery.models.view_state import ViewState
from gallery.utils.config import get_config

from .layout import body_view
from .service import GalleryService

EMPTY_MESSAGE = "No photos yet. Add your first one on the right!"
FOOTER_TEXT = "Add your photos, organize by tags, and spotlight your favorites."


def tag_chip_classes(active: bool) -> str:
    """Tailwind classes for a tag chip."""
    base = "px-3 py-1 rounded-full text-sm border"
    if active:
        return f"{base} bg-blue-600 text-white border-blue-600"
    return f"{base} bg-white text-gray-700 border-gray-300"


def create_header(service: GalleryService, title: str):
    """Create the app header with search and the featured toggle."""
    with ui.header().classes("bg-white text-gray-800 border-b"):
        with ui.row().classes("w-full max-w-6xl mx-auto items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                ui.label("P").classes(
                    "h-9 w-9 rounded-lg bg-blue-600 text-white grid place-items-center font-bold"
                )
                with ui.column().classes("gap-0"):
                    ui.label(title).classes("text-xl font-bold")
                    ui.label("Add images by URL and organize with tags").classes(
                        "text-sm text-gray-500"
                    )

            with ui.row().classes("items-center gap-3"):
                ui.input(
                    placeholder="Search...",
                    on_change=lambda e: service.set_query(e.value or ""),
                ).classes("text-sm")

                async def toggle_featured(e):
                    await service.set_featured_only(bool(e.value))

                ui.checkbox("Featured only", on_change=toggle_featured)


def render_photo_card(photo: Photo):
    """Render one photo as a card."""
    with ui.card().classes("w-full p-0 overflow-hidden"):
        ui.image(photo.image_url).classes("w-full aspect-[4/3] object-cover")
        with ui.column().classes("p-3 gap-1 w-full"):
            with ui.row().classes("w-full items-center justify-between"):
                ui.label(photo.title).classes("font-semibold text-gray-800 truncate").tooltip(
                    photo.title
                )
                if photo.featured:
                    ui.badge("Featured", color="yellow-2", text_color="yellow-10")
            if photo.description:
                ui.label(photo.description).classes("text-sm text-gray-600 line-clamp-2")
            if photo.tags:
                with ui.row().classes("gap-1 mt-2"):
                    for tag in photo.tags:
                        ui.label(tag).classes(
                            "text-[10px] px-2 py-0.5 rounded-full bg-gray-100 text-gray-700 border"
                        )


def create_add_form(service: GalleryService, backend_url: str):
    """Create the add-photo form. Returns a callback syncing inputs to the state."""
    with ui.card().classes("w-full p-5"):
        ui.label("Add a Photo").classes("text-lg font-semibold text-gray-800")
        ui.label("Paste an image URL, give it a title, and tag it.").classes(
            "text-sm text-gray-500 mb-4"
        )

        title_input = ui.input(
            label="Title",
            placeholder="Sunset at the beach",
            on_change=lambda e: service.update_form(title=e.value or ""),
        ).classes("w-full")
        url_input = ui.input(
            label="Image URL",
            placeholder="https://.../your-image.jpg",
            on_change=lambda e: service.update_form(image_url=e.value or ""),
        ).classes("w-full")
        description_input = ui.textarea(
            label="Description",
            placeholder="Optional details about this photo",
            on_change=lambda e: service.update_form(description=e.value or ""),
        ).classes("w-full")
        tags_input = ui.input(
            label="Tags (comma separated)",
            placeholder="travel, family, nature",
            on_change=lambda e: service.update_form(tags=e.value or ""),
        ).classes("w-full")
        featured_input = ui.checkbox(
            "Mark as featured",
            on_change=lambda e: service.update_form(featured=bool(e.value)),
        )

        ui.button("Save Photo", on_click=service.submit).classes("w-full mt-2")

        with ui.row().classes("text-xs text-gray-500 gap-1"):
            ui.label("Backend:")
            ui.label(backend_url).classes("font-mono")

    def sync(state: ViewState) -> None:
        # Only push values that differ, so typing is not interrupted
        form = state.form
        for element, value in (
            (title_input, form.title),
            (url_input, form.image_url),
            (description_input, form.description),
            (tags_input, form.tags),
            (featured_input, form.featured),
        ):
            if element.value != value:
                element.value = value

    return sync


@ui.page("/")
def gallery_page():
    """Gallery page - photo grid with filters and the add-photo form."""
    config = get_config()
    service = GalleryService(HttpPhotoStore())

    create_header(service, config.ui_title)

    with ui.row().classes("w-full max-w-6xl mx-auto p-4 gap-8 items-start no-wrap"):
        with ui.column().classes("flex-grow"):

            @ui.refreshable
            def tag_bar() -> None:
                with ui.row().classes("mb-4 flex-wrap gap-2"):
                    for tag in service.tag_vocabulary:
                        ui.button(
                            tag,
                            on_click=lambda _, t=tag: service.select_tag(t),
                        ).props("flat no-caps").classes(
                            tag_chip_classes(tag == service.state.selected_tag)
                        )

            @ui.refreshable
            def photo_grid() -> None:
                state = service.state
                photos = service.visible_photos
                view = body_view(state, photos)

                if view == "loading":
                    ui.label("Loading photos...").classes("w-full text-center text-gray-600")
                elif view == "error":
                    ui.label(state.error).classes(
                        "w-full text-red-600 bg-red-50 border border-red-200 p-3 rounded"
                    )
                elif view == "empty":
                    ui.label(EMPTY_MESSAGE).classes("text-gray-600")
                else:
                    with ui.grid(columns=3).classes("w-full gap-4"):
                        for photo in photos:
                            render_photo_card(photo)

            tag_bar()
            photo_grid()

        with ui.column().classes("w-96"):
            sync_form = create_add_form(service, config.backend_url)

    with ui.footer().classes("bg-transparent text-sm text-gray-500 justify-center"):
        ui.label(FOOTER_TEXT)

    def on_state_change(state: ViewState) -> None:
        tag_bar.refresh()
        photo_grid.refresh()
        sync_form(state)

    service.subscribe(on_state_change)
    ui.timer(0.1, service.mount, once=True)


def main() -> None:
    """Start the gallery UI server."""
    config = get_config()
    ui.run(title=config.ui_title, port=config.ui_port, reload=False)

