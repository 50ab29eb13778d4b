"""Gradio UI for the Vintage Art & Craft Gallery."""

import logging

import gradio as gr

from vintagegallery.core.config import config

from .handlers import (
    attach_image,
    close_uploader,
    load_gallery,
    open_uploader,
    submit_upload,
    update_artist,
    update_description,
    update_tags,
    update_title,
)
from .models import LOADING_MESSAGE, GallerySession

logger = logging.getLogger(__name__)


def create_ui() -> tuple[gr.Blocks, str]:
    """Create the gallery UI.

    Returns:
        Tuple of (Gradio Blocks app, custom CSS string)
    """
    custom_css = """
    .uploader-panel {
        border: 2px dashed #b45309;
        border-radius: 8px;
        padding: 12px;
        background: #fffbeb;
    }
    """

    app = gr.Blocks(title="Vintage Art & Craft Gallery")

    with app:
        # Session state - one instance per user
        ui_state = gr.State(GallerySession())

        with gr.Row():
            gr.Markdown("# Vintage Art & Craft Gallery")
            upload_btn = gr.Button("+ Upload", variant="primary", scale=0)
            refresh_btn = gr.Button("Refresh", size="sm", scale=0)

        uploader = create_uploader_panel()

        status = gr.Markdown(LOADING_MESSAGE)
        gallery = gr.Gallery(
            label="Collection",
            columns=4,
            object_fit="cover",
            type="pil",
            show_label=False,
        )

        # Load the collection when the page opens
        app.load(
            fn=load_gallery,
            inputs=[ui_state],
            outputs=[gallery, status, ui_state],
        )
        refresh_btn.click(
            fn=load_gallery,
            inputs=[ui_state],
            outputs=[gallery, status, ui_state],
        )

        upload_btn.click(
            fn=open_uploader,
            inputs=[ui_state],
            outputs=[
                uploader["panel"],
                uploader["title"],
                uploader["artist"],
                uploader["description"],
                uploader["tags"],
                uploader["preview"],
                ui_state,
            ],
        )
        uploader["close_btn"].click(
            fn=close_uploader,
            inputs=[ui_state],
            outputs=[uploader["panel"], ui_state],
        )

        # .input fires on user edits only, not when open_uploader clears the fields
        uploader["title"].input(
            fn=update_title, inputs=[uploader["title"], ui_state], outputs=[ui_state]
        )
        uploader["artist"].input(
            fn=update_artist, inputs=[uploader["artist"], ui_state], outputs=[ui_state]
        )
        uploader["description"].input(
            fn=update_description, inputs=[uploader["description"], ui_state], outputs=[ui_state]
        )
        uploader["tags"].input(
            fn=update_tags, inputs=[uploader["tags"], ui_state], outputs=[ui_state]
        )

        uploader["file"].upload(
            fn=attach_image,
            inputs=[uploader["file"], ui_state],
            outputs=[uploader["preview"], ui_state],
        )

        uploader["submit_btn"].click(
            fn=submit_upload,
            inputs=[ui_state],
            outputs=[uploader["panel"], gallery, status, ui_state],
        )

    return app, custom_css


def create_uploader_panel() -> dict:
    """Create the hidden uploader panel.

    Returns:
        Dictionary of uploader components for event wiring
    """
    with gr.Column(visible=False, elem_classes="uploader-panel") as panel:
        with gr.Row():
            gr.Markdown("### Upload Artwork")
            close_btn = gr.Button("X", size="sm", scale=0)

        title = gr.Textbox(label="Title", placeholder="Title")
        artist = gr.Textbox(label="Artist", placeholder="Artist (optional)")
        description = gr.Textbox(label="Description", placeholder="Description (optional)", lines=3)
        tags = gr.Textbox(label="Tags", placeholder="Tags (comma separated)")

        with gr.Row():
            file = gr.File(
                label="Drag & drop an image here, or click to select",
                file_types=["image"],
                type="filepath",
            )
            preview = gr.Image(label="Preview", type="pil", interactive=False, height=256)

        submit_btn = gr.Button("Upload", variant="primary")

    return {
        "panel": panel,
        "close_btn": close_btn,
        "title": title,
        "artist": artist,
        "description": description,
        "tags": tags,
        "file": file,
        "preview": preview,
        "submit_btn": submit_btn,
    }


def main():
    """Main entry point for the application."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting Vintage Art & Craft Gallery...")
    logger.info(f"Configuration: {config.model_dump()}")

    app, custom_css = create_ui()

    logger.info(f"Launching Gradio UI on {config.server_name}:{config.server_port}")

    app.launch(
        server_name=config.server_name,
        server_port=config.server_port,
        share=config.share,
        show_error=True,
        inbrowser=False,
        css=custom_css,
    )


if __name__ == "__main__":
    main()
