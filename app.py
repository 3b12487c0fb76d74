import streamlit as st

from automatas import PredictiveParser
from errors import GrammarConflict
from reporter import first_follow_frame, table_frame, trace_frame
from samples import SAMPLES, sample_grammar, sample_input
from table import LL1TableBuilder
from utils import configure_logging, limpiar_texto

st.set_page_config(page_title="LL(1) - FIRST, FOLLOW, Tabla y Parser", page_icon="🧩", layout="wide")
configure_logging()

# ---------- Session helpers ----------
def _store_results(**kwargs):
    st.session_state["ll1_results"] = kwargs

def _has_results() -> bool:
    return "ll1_results" in st.session_state

def _get_results():
    return st.session_state.get("ll1_results", {})

def _clear_trace():
    for k in ("trace", "accepted", "err"):
        st.session_state.pop(k, None)

# ---------- App ----------
def app():
    st.title("Analizador sintáctico predictivo LL(1)")
    st.caption("Elige una gramática de ejemplo; la cadena se separa por espacios y se le agrega `$`.")

    col1, col2 = st.columns([1, 2])
    with col1:
        nombre = st.selectbox("Gramática:", sorted(SAMPLES), key="grammar_name")
        grammar = sample_grammar(nombre)
        st.code(str(grammar), language="none")
    with col2:
        cadena_input = st.text_area("Cadena a analizar (tokens separados por espacio):",
                                    value=sample_input(nombre), height=140)

    c1, c2 = st.columns(2)
    with c1:
        if st.button("1) Construir tabla LL(1)", type="primary", use_container_width=True):
            _clear_trace()
            try:
                builder = LL1TableBuilder(grammar)
            except GrammarConflict as exc:
                _store_results(name=nombre, builder=None, conflict=exc)
                st.error(str(exc))
            else:
                _store_results(name=nombre, builder=builder, conflict=None)
                st.success("Tabla LL(1) construida sin conflictos ✅")

    with c2:
        if st.button("2) Simular parsing", use_container_width=True):
            res = _get_results()
            if not _has_results() or res["name"] != nombre:
                st.warning("Primero construye la tabla de esta gramática.")
            elif res["builder"] is None:
                st.warning("La gramática no es LL(1); no hay tabla para simular.")
            else:
                result = PredictiveParser(res["builder"].table).parse(limpiar_texto(cadena_input or ""))
                st.session_state["trace"] = result
                st.session_state["accepted"] = result.accepted
                st.session_state["err"] = str(result.error) if result.error else ""

    if not _has_results():
        return

    res = _get_results()
    if res["builder"] is None:
        conflict: GrammarConflict = res["conflict"]
        st.subheader("Conflicto LL(1)")
        st.error(f"⚠️ {conflict}")
        return

    builder: LL1TableBuilder = res["builder"]

    # ---- FIRST / FOLLOW
    st.subheader("FIRST y FOLLOW")
    st.caption(f"Símbolo inicial: **{builder.grammar.start}**")
    st.dataframe(first_follow_frame(builder.grammar, builder.first, builder.follow),
                 hide_index=True, use_container_width=True)

    # ---- Tabla LL(1)
    st.subheader("Tabla LL(1) — M[A, t]")
    st.dataframe(table_frame(builder), hide_index=True, use_container_width=True)

    # ---- Simulación (si existe)
    if "trace" in st.session_state:
        st.subheader("Simulación LL(1) — Pila y acciones")
        ok = st.session_state["accepted"]
        err = st.session_state["err"]
        st.dataframe(trace_frame(st.session_state["trace"]), hide_index=True, use_container_width=True)
        if ok:
            st.success("✅ Cadena aceptada.")
        else:
            st.error(f"❌ Cadena rechazada. Detalle: {err}")


if __name__ == "__main__":
    app()
