# boards_frontend/ui.py

import gradio as gr

MAX_BOARDS = 12  # Max number of boards the viewer can render.


def create_summary_panel():
    """Builds the summary table and the refresh / reload controls."""
    gr.Markdown("## 看板总览")
    with gr.Row():
        refresh_btn = gr.Button("🔄 刷新看板", variant="secondary")
        reload_btn = gr.Button("☁️ 从 Cloudinary 重新加载", variant="primary")
    status_output = gr.Markdown()
    dataframe = gr.DataFrame(headers=["看板", "图片数", "视频数", "错误"], interactive=False, row_count=(3, "dynamic"))

    components = {
        "refresh_btn": refresh_btn, "reload_btn": reload_btn,
        "status_output": status_output, "dataframe": dataframe,
    }
    return components


def create_board_slots():
    """Builds MAX_BOARDS hidden board sections; handlers reveal one per board in the snapshot."""
    slots = []
    for i in range(MAX_BOARDS):
        with gr.Group(visible=False) as group:
            title = gr.Markdown(f"### 看板 {i+1}")
            with gr.Row():
                image_gallery = gr.Gallery(label="图片", columns=4, height="auto", allow_preview=True)
                video_gallery = gr.Gallery(label="视频", columns=2, height="auto", allow_preview=True)
        slots.append({"group": group, "title": title, "images": image_gallery, "videos": video_gallery})
    return slots


def slot_outputs(slots):
    """Flattens board slots in the order returned by handlers.board_slot_updates."""
    return [comp for s in slots for comp in (s["group"], s["title"], s["images"], s["videos"])]
