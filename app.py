# app.py
import logging
import os

import streamlit as st

import facelets
import solver
from cube import Cube
from errors import CubeError, SolverError
from moves import MOVES, QUARTER_TURNS, inverse

SCRAMBLE_LENGTH = int(os.environ.get("CUBE_SCRAMBLE_LENGTH", "20"))
LOG_LEVEL = os.environ.get("CUBE_LOG_LEVEL", "INFO")

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("app")

st.set_page_config(page_title="Rubik's Cube", layout="wide")

# sticker value -> display colour, same index as the face order U,R,F,D,L,B
STICKER_COLORS = ["#FFFFFF", "#D62828", "#2A9D3F", "#FFD500", "#FF8C00", "#1E5AD6"]
FACE_LABELS = ["0: Up (White)", "1: Right (Red)", "2: Front (Green)",
               "3: Down (Yellow)", "4: Left (Orange)", "5: Back (Blue)"]

# --- CSS styling
st.markdown("""
<style>
body { background: linear-gradient(135deg, #071A2D, #0B3B56); color: #e6f7ff; }
h1 { color:#FFD166; text-align:center; }
.card { background: rgba(255,255,255,0.03); padding: 12px; border-radius: 12px; box-shadow: 0 4px 20px rgba(0,0,0,0.4); }
.small { font-size:0.9rem; color:#cfeefb; }
.net { display:grid; grid-template-columns: repeat(12, 32px); grid-auto-rows: 32px; gap:2px; justify-content:center; }
.sticker { border:1px solid #000; border-radius:4px; }
</style>
""", unsafe_allow_html=True)

st.markdown("<h1>🧊 Rubik's Cube</h1>", unsafe_allow_html=True)

# Init session state
if "cube" not in st.session_state:
    st.session_state.cube = Cube()
if "status" not in st.session_state:
    st.session_state.status = "Last Move: none"
if "moves" not in st.session_state:
    st.session_state.moves = []
if "move_index" not in st.session_state:
    st.session_state.move_index = 0
if "solution_text" not in st.session_state:
    st.session_state.solution_text = ""
if "step_error" not in st.session_state:
    st.session_state.step_error = ""

cube = st.session_state.cube


def clear_solution():
    st.session_state.moves = []
    st.session_state.move_index = 0
    st.session_state.solution_text = ""
    st.session_state.step_error = ""


def on_move(move):
    cube = st.session_state.cube
    cube.apply_move(move)
    st.session_state.status = f"Last Move: {move}" + (" | SOLVED!" if cube.is_solved() else "")
    clear_solution()


def on_reset():
    st.session_state.cube.reset()
    st.session_state.status = "Last Move: reset"
    clear_solution()


def on_scramble():
    cube = st.session_state.cube
    cube.reset()
    sequence = cube.scramble(SCRAMBLE_LENGTH)
    st.session_state.status = f"Last Move: scramble ({sequence})"
    clear_solution()


def step_to(index, move):
    cube = st.session_state.cube
    try:
        cube.apply_move(move)
    except CubeError as e:
        logger.warning("Cannot apply solution step %r: %s", move, e)
        st.session_state.status = "Error applying solution"
        st.session_state.step_error = str(e)
        return
    st.session_state.move_index = index
    st.session_state.step_error = ""
    st.session_state.status = f"Last Move: {move}" + (" | SOLVED!" if cube.is_solved() else "")


def on_next():
    moves = st.session_state.moves
    i = st.session_state.move_index
    if i < len(moves):
        step_to(i + 1, moves[i])


def on_prev():
    moves = st.session_state.moves
    i = st.session_state.move_index
    if i > 0:
        try:
            undo = inverse(moves[i - 1])
        except CubeError as e:
            st.session_state.status = "Error applying solution"
            st.session_state.step_error = str(e)
            return
        step_to(i - 1, undo)


def render_net(faces):
    cells = []
    for row in facelets.to_flattened_net(faces).tolist():
        for v in row:
            if v < 0:
                cells.append("<div></div>")
            else:
                cells.append(f'<div class="sticker" style="background:{STICKER_COLORS[v]}"></div>')
    return f'<div class="net">{"".join(cells)}</div>'


st.markdown(f'<div class="card small">{st.session_state.status}</div>', unsafe_allow_html=True)

left, right = st.columns([3, 2])

with left:
    st.markdown(render_net(cube.get_faces()), unsafe_allow_html=True)

    st.markdown("**Moves**")
    for chunk in (QUARTER_TURNS[:6], QUARTER_TURNS[6:], MOVES[len(QUARTER_TURNS):]):
        cols = st.columns(len(chunk))
        for col, mv in zip(cols, chunk):
            with col:
                st.button(mv, key=f"move_{mv}", on_click=on_move, args=(mv,), width="stretch")

    col1, col2 = st.columns(2)
    with col1:
        st.button("Reset", on_click=on_reset, width="stretch")
    with col2:
        st.button("Scramble", on_click=on_scramble, width="stretch")

    if cube.move_sequence:
        st.markdown("**Last scramble:**")
        st.code(cube.move_sequence)

with right:
    st.subheader("Cube State and Solution")
    legend = st.columns(3)
    for i, label in enumerate(FACE_LABELS):
        with legend[i % 3]:
            st.markdown(
                f'<span class="sticker" style="background:{STICKER_COLORS[i]};padding:0 8px">&nbsp;</span> {label}',
                unsafe_allow_html=True,
            )

    cube_str = cube.to_facelet_string()
    st.markdown("**Cube string (URFDLB order):**")
    st.code(cube_str)

    backend = st.selectbox("Solver", sorted(solver.BACKENDS),
                           index=sorted(solver.BACKENDS).index(solver.SOLVER_BACKEND)
                           if solver.SOLVER_BACKEND in solver.BACKENDS else 0)
    if st.button("Solve"):
        with st.spinner("Requesting solution..."):
            try:
                st.session_state.moves = solver.solve(cube_str, backend=backend)
                st.session_state.move_index = 0
                st.session_state.solution_text = " ".join(st.session_state.moves)
                st.session_state.status = "Solution retrieved"
            except SolverError as e:
                logger.warning("Solve failed: %s", e)
                clear_solution()
                st.session_state.status = "Error getting solution"
                st.error(str(e))

    if st.session_state.solution_text:
        st.markdown("**Solution:**")
        st.code(st.session_state.solution_text)

        moves = st.session_state.moves
        if moves:
            i = st.session_state.move_index
            col1, col2, col3 = st.columns([1, 2, 1])
            with col1:
                st.button("Prev", key="prev_btn", on_click=on_prev, disabled=i == 0)
            with col3:
                st.button("Next", key="next_btn", on_click=on_next, disabled=i >= len(moves))
            with col2:
                st.write(f"Step {i} / {len(moves)}")
                if i < len(moves):
                    st.markdown(f"### {solver.human_read_move(moves[i])}")
                else:
                    st.success("All solution moves applied.")
            if st.session_state.step_error:
                st.error(f"Cannot apply solution step: {st.session_state.step_error}")
    elif st.session_state.status == "Solution retrieved":
        st.warning("Solver returned no moves (cube may already be solved).")

# Manual cube state input
st.markdown("---")
st.subheader("Manual input")
st.markdown('<div class="small">Enter cube state as comma-separated numbers (54 values, 0-5), '
            'or paste a 54-character cube string (URFDLB order).</div>', unsafe_allow_html=True)

state_text = st.text_input("Cube State", value=facelets.format_state_text(cube.get_faces()))
if st.button("Apply State"):
    try:
        cube.set_faces(facelets.parse_state_text(state_text))
        st.session_state.status = "Applied custom cube state"
        clear_solution()
        st.rerun()
    except CubeError as e:
        st.error(f"Invalid input format: {e}")

manual = st.text_area("Paste 54-character cube string (optional)", height=80)
if st.button("Apply Cube String") and manual:
    manual_clean = manual.strip().replace(" ", "").upper()
    try:
        cube.set_faces(facelets.from_facelet_string(manual_clean))
        st.session_state.status = "Applied cube string"
        clear_solution()
        st.rerun()
    except CubeError as e:
        st.error(f"Invalid manual string: {e}")
