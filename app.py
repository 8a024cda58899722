import pandas as pd
import streamlit as st

from asset_registry import DocumentKind
from calc_client import DiagramKind
from compressor import CalculatorSession
from exporter import DownloadControl, ExportOrchestrator
from field_labels import COMPRESSOR_MODELS, FIELD_LABELS, REFRIGERANTS
from logging_setup import init_logging
from pdf_report import REPORT_TITLE


def get_session() -> CalculatorSession:
    if 'calculator' not in st.session_state:
        st.session_state.calculator = CalculatorSession()
    return st.session_state.calculator


def get_orchestrator() -> ExportOrchestrator:
    if 'orchestrator' not in st.session_state:
        st.session_state.orchestrator = ExportOrchestrator()
    return st.session_state.orchestrator


def offer_download(outcome, key):
    """Show the notice of a failed export, or a button for the finished file."""
    if not outcome.ok:
        st.error(outcome.notice)
        return
    artifact = outcome.artifact
    st.download_button(
        label=f"Save {artifact.file_name}",
        data=artifact.data,
        file_name=artifact.file_name,
        mime=artifact.mime,
        key=key,
        use_container_width=True,
    )


def parameter_form(session):
    form_input = session.form_input
    st.subheader("Enter Compressor Parameters")

    model = st.selectbox(FIELD_LABELS.label_for("model"), COMPRESSOR_MODELS,
                         index=COMPRESSOR_MODELS.index(form_input.model)
                         if form_input.model in COMPRESSOR_MODELS else 0)
    refrigerant = st.selectbox(FIELD_LABELS.label_for("refrigerant"), REFRIGERANTS,
                               index=REFRIGERANTS.index(form_input.refrigerant)
                               if form_input.refrigerant in REFRIGERANTS else 0)
    evap_temp = st.number_input(FIELD_LABELS.label_for("evap_temp"), value=float(form_input.evap_temp),
                                step=0.5, key="input_evap_temp")
    cond_temp = st.number_input(FIELD_LABELS.label_for("cond_temp"), value=float(form_input.cond_temp),
                                step=0.5, key="input_cond_temp")
    superheat = st.number_input(FIELD_LABELS.label_for("superheat"), value=float(form_input.superheat),
                                step=0.5, key="input_superheat")
    speed = st.number_input(FIELD_LABELS.label_for("speed"), value=int(form_input.speed), step=10,
                            key="input_speed")

    for key, value in (("model", model), ("refrigerant", refrigerant), ("evap_temp", evap_temp),
                       ("cond_temp", cond_temp), ("superheat", superheat), ("speed", speed)):
        session.update_field(key, value)

    return st.button("Calculate", type="primary", use_container_width=True)


def results_panel(session, orchestrator):
    st.subheader(REPORT_TITLE)
    if session.results is None:
        st.info("Run a calculation to see the results.")
        return

    model = session.results.get("Compressor Model")
    image = orchestrator.load_reference_image(model) if model else None
    if image is not None:
        st.image(image.data, caption=model, width=240)

    fields = session.display_fields()
    st.dataframe(pd.DataFrame(fields, columns=["Field", "Value"]), hide_index=True,
                 use_container_width=True)

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("Download the Generated Result", use_container_width=True):
            with st.spinner("Generating PDF report..."):
                offer_download(orchestrator.export_report(session), "report_download")
    with col2:
        if st.button("Get PH-Graph Economizer", use_container_width=True):
            with st.spinner("Rendering PH-Graph Economizer..."):
                offer_download(orchestrator.export_diagram(session, DiagramKind.ECONOMIZER),
                               "economizer_download")
    with col3:
        if st.button("Get PH-Graph Diagram", use_container_width=True):
            with st.spinner("Rendering PH-Graph..."):
                offer_download(orchestrator.export_diagram(session, DiagramKind.PRIMARY),
                               "diagram_download")


def technical_data(session, orchestrator):
    st.subheader("Technical Data:")
    model = session.form_input.model
    st.markdown(f"**Model - {model}**")

    columns = st.columns(len(DocumentKind))
    for column, kind in zip(columns, DocumentKind):
        with column:
            control = DownloadControl(f"Download {kind.label}")
            placeholder = st.empty()
            if placeholder.button(control.label, key=f"doc_{kind.name}", use_container_width=True):
                placeholder.button(DownloadControl.BUSY_LABEL, key=f"doc_{kind.name}_busy",
                                   disabled=True, use_container_width=True)
                outcome = orchestrator.export_document(model, kind, control)
                placeholder.empty()
                offer_download(outcome, f"doc_{kind.name}_download")


def main():
    st.set_page_config(
        page_title="Khione Compressor Calculator",
        page_icon="❄️",
        layout="wide",
    )
    init_logging()

    session = get_session()
    orchestrator = get_orchestrator()

    st.title("Khione Compressor Calculator")

    col_input, col_output = st.columns(2)
    with col_input:
        calculate_btn = parameter_form(session)
        if calculate_btn:
            with st.spinner("Calculating..."):
                session.submit(orchestrator.client)
        if session.error:
            st.error(session.error)

    with col_output:
        results_panel(session, orchestrator)

    st.markdown("---")
    technical_data(session, orchestrator)


# Run the main function
if __name__ == "__main__":
    main()
