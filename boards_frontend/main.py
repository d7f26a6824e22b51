# boards_frontend/main.py
# Assembles the UI and wires the event handlers.

import os
import gradio as gr
from functools import partial

from .config import config
from . import handlers
from . import ui


def build_demo():
    """Builds the Gradio UI and wires up all the event handlers."""
    with gr.Blocks(theme=gr.themes.Soft(primary_hue="blue", secondary_hue="sky"), title="Cloud Boards") as demo:
        backend_status = gr.Markdown()
        gr.Markdown("# Cloud Boards 媒体看板")

        summary_ui = ui.create_summary_panel()
        slots = ui.create_board_slots()

        board_outputs = [summary_ui["dataframe"], summary_ui["status_output"]] + ui.slot_outputs(slots)

        demo.load(handlers.check_backend_status, outputs=backend_status)
        demo.load(partial(handlers.refresh_boards, ui.MAX_BOARDS), outputs=board_outputs)

        summary_ui["refresh_btn"].click(partial(handlers.refresh_boards, ui.MAX_BOARDS), outputs=board_outputs)
        summary_ui["reload_btn"].click(
            partial(handlers.reload_from_cloudinary, ui.MAX_BOARDS), outputs=board_outputs
        ).then(handlers.check_backend_status, outputs=backend_status)
    return demo


def main():
    """Launches the viewer."""
    os.environ["GRADIO_ANALYTICS_ENABLED"] = "false"
    demo = build_demo()
    print("Cloud Boards 前端即将启动...")
    demo.launch(server_name="0.0.0.0", server_port=config.run_port, inbrowser=False)
