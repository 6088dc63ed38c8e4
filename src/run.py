"""
Método Africano quiz: Gradio front end.

Landing page, nine question pages and the results card, driven by a QuizFlow
kept per browser session.
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import gradio as gr

from src.config import config
from src.models.catalog import load_catalog
from src.models.question import QuestionKind
from src.orchestrator import Page, QuizFlow
from src.utils.logger import setup_logging
from src.utils.presenter import format_question, format_result, validation_message


logger = setup_logging()
catalog = load_catalog()


# ==================== UI Helper Functions ====================

def _render(flow: QuizFlow, refresh_input: bool = True):
    """Updates for every component, derived from the flow state."""
    session = flow.session
    question = session.current_question()
    on_quiz = flow.page == Page.QUIZ
    is_choice = question is not None and question.kind == QuestionKind.CHOICE
    answer = session.answer_for(session.current_index)

    rules = question.validation if question is not None else None
    message = validation_message(flow.last_failure, rules)

    return (
        flow,
        gr.update(visible=flow.page == Page.LANDING),
        gr.update(visible=on_quiz),
        gr.update(visible=flow.page == Page.RESULTS),
        format_question(question, session.current_index, len(session.catalog), answer) if on_quiz else "",
        gr.update(
            visible=on_quiz and is_choice,
            choices=[(opt.label, opt.value) for opt in question.options] if is_choice else [],
            value=answer if is_choice else None,
        ),
        _input_update(question, on_quiz and not is_choice, answer, refresh_input),
        f"⚠️ {message}" if message else "",
        gr.update(interactive=session.can_go_previous()),
        gr.update(interactive=session.can_go_next(), value=flow.next_label()),
        format_result(flow.result) if flow.result is not None else "",
    )


def _input_update(question, visible: bool, answer, refresh: bool):
    # Keep what the user is typing; only reset the box when the question changes
    if not refresh:
        return gr.update(visible=visible)
    return gr.update(
        visible=visible,
        value=answer if (visible and answer) else "",
        placeholder=(question.placeholder or "") if question is not None else "",
    )


def new_flow() -> QuizFlow:
    # Page re-renders are instant, so the transition guard is released at once
    return QuizFlow(catalog=catalog, auto_finish_transitions=True)


def start_quiz_ui(flow: QuizFlow):
    flow.start_quiz()
    return _render(flow)


def select_option_ui(flow: QuizFlow, value: str):
    if value:
        flow.select_option(value)
    return _render(flow)


def submit_input_ui(flow: QuizFlow, raw: str):
    flow.submit_input(raw)
    return _render(flow, refresh_input=False)


def next_ui(flow: QuizFlow):
    flow.next()
    return _render(flow)


def previous_ui(flow: QuizFlow):
    flow.previous()
    return _render(flow)


def restart_ui(flow: QuizFlow):
    flow.restart()
    return _render(flow)


def create_interface() -> gr.Blocks:
    """Build the Gradio Blocks app."""
    with gr.Blocks(title="Método Africano") as demo:
        flow_state = gr.State(new_flow)

        with gr.Column(visible=True) as landing_col:
            gr.Markdown(
                "# Método Africano\n\n"
                "Responda a 9 perguntas rápidas e descubra o seu potencial de crescimento."
            )
            start_btn = gr.Button("Começar o Quiz", variant="primary")

        with gr.Column(visible=False) as quiz_col:
            question_md = gr.Markdown()
            options_radio = gr.Radio(choices=[], label="Escolha uma opção", visible=False)
            size_input = gr.Textbox(label="Tamanho (cm)", visible=False)
            message_md = gr.Markdown()
            with gr.Row():
                prev_btn = gr.Button("Anterior")
                next_btn = gr.Button("Próximo", variant="primary")

        with gr.Column(visible=False) as results_col:
            result_md = gr.Markdown()
            restart_btn = gr.Button("Refazer o Quiz")

        outputs = [
            flow_state,
            landing_col,
            quiz_col,
            results_col,
            question_md,
            options_radio,
            size_input,
            message_md,
            prev_btn,
            next_btn,
            result_md,
        ]

        start_btn.click(start_quiz_ui, inputs=[flow_state], outputs=outputs)
        options_radio.input(select_option_ui, inputs=[flow_state, options_radio], outputs=outputs)
        size_input.input(submit_input_ui, inputs=[flow_state, size_input], outputs=outputs)
        size_input.submit(submit_input_ui, inputs=[flow_state, size_input], outputs=outputs).then(
            next_ui, inputs=[flow_state], outputs=outputs
        )
        next_btn.click(next_ui, inputs=[flow_state], outputs=outputs)
        prev_btn.click(previous_ui, inputs=[flow_state], outputs=outputs)
        restart_btn.click(restart_ui, inputs=[flow_state], outputs=outputs)

    return demo


if __name__ == "__main__":
    errors = config.validate()
    for error in errors:
        logger.warning("Config: %s", error)

    demo = create_interface()
    demo.launch(server_name=config.ui.server_name, server_port=config.ui.server_port)
