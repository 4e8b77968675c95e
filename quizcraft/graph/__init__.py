"""LangGraph workflow and state management."""

# Import directly from modules as needed:
# from quizcraft.graph.state import QuizState, create_initial_state
# from quizcraft.graph.workflow import compile_workflow, create_quiz_workflow
