import streamlit as st

st.set_page_config(
    page_title="Semantic Resume Matcher",
    page_icon="📄",
    layout="wide"
)

import logging, time

# INTERNAL LIBRARIES
from analyzer import MatchAnalyzer
from file_management import load_config
from models import score_tier

# --- LOGGER CLASS ------------------------------------
class AppLogger:
    def __init__(self, placeholder):
        self.placeholder = placeholder
        self.logs = []

    def log(self, message):
        timestamp = time.strftime("%H:%M:%S")
        formatted_message = f"[{timestamp}] {message}"
        self.logs.append(formatted_message)
        self.render()

    def render(self):
        if not self.logs:
            return
        # Display logs in reverse order (latest first) to keep visibility
        self.placeholder.code("\n".join(self.logs[::-1]), language="text")

# --- CONFIGURATION -----------------------------------
config = load_config()

log_config = config.get("logging", {})
logging.basicConfig(
    level=log_config.get("level", "INFO"),
    format=log_config.get("format", "%(asctime)s [%(levelname)s] %(name)s: %(message)s"),
)

TIER_COLORS = {"strong": "green", "moderate": "orange", "weak": "red"}

# --- CONTROL STATE INITIALIZATIONS - SESSION CONTROL ---
if "analyzer" not in st.session_state:
    st.session_state.analyzer = MatchAnalyzer(config)
if "resume_text" not in st.session_state:
    st.session_state.resume_text = ""
if "job_description_text" not in st.session_state:
    st.session_state.job_description_text = ""

analyzer = st.session_state.analyzer

# ------------------------------------
# APP FUNCTIONS TO IMPROVE READABILITY
# ------------------------------------
def load_sample_data():
    """Button callback, runs before the text areas are created on the next rerun."""
    analyzer.load_sample_data()
    st.session_state.resume_text = analyzer.inputs.resume
    st.session_state.job_description_text = analyzer.inputs.job_description

def colored(score):
    return f":{TIER_COLORS[score_tier(score)]}[{score}]"

def render_result(result):
    st.markdown(f"## {colored(result.overall_score)}")
    st.markdown("**Overall Match Score**")

    score_cols = st.columns(3)
    breakdown = [
        ("Skills Match", result.skills_match),
        ("Experience Match", result.experience_match),
        ("Qualifications Match", result.qualifications_match),
    ]
    for col, (label, score) in zip(score_cols, breakdown):
        with col:
            st.markdown(f"**{label}**")
            st.progress(score)
            st.markdown(f"### {colored(score)}%")

    strengths_col, gaps_col = st.columns(2)
    with strengths_col:
        st.subheader("✅ Strengths")
        for strength in result.strengths:
            st.text(f"• {strength}")
    with gaps_col:
        st.subheader("⚠️ Gaps to Address")
        for gap in result.gaps:
            st.text(f"• {gap}")

    st.subheader("Recommendation")
    st.text(result.recommendation)

# --- UI LAYOUT ---------------------------------------
st.title("Semantic Resume Matcher")
st.caption("Powered by Gemini")
st.button("Load sample data", key="load_sample", on_click=load_sample_data)

main_col, log_col = st.columns([3, 1])

with log_col:
    st.subheader("📝 Process Log")
    log_placeholder = st.empty()
    if "logger" not in st.session_state:
        st.session_state.logger = AppLogger(log_placeholder)
    else:
        # Re-attach the placeholder to the existing logger instance on rerun
        st.session_state.logger.placeholder = log_placeholder
        st.session_state.logger.render()

logger = st.session_state.logger

# --- MAIN EXECUTION ----------------------------------
with main_col:
    resume_col, jd_col = st.columns(2)
    with resume_col:
        st.subheader("📄 Resume")
        resume_text = st.text_area(
            "Resume",
            key="resume_text",
            height=320,
            placeholder="Paste the candidate's resume here...",
            label_visibility="collapsed",
        )
    with jd_col:
        st.subheader("💼 Job Description")
        job_description_text = st.text_area(
            "Job Description",
            key="job_description_text",
            height=320,
            placeholder="Paste the job description here...",
            label_visibility="collapsed",
        )

    analyzer.update_inputs(resume_text, job_description_text)

    button_label = "Analyzing Match..." if analyzer.is_loading else "Analyze Match"
    if st.button(button_label, key="analyze", type="primary", disabled=analyzer.is_loading):
        if analyzer.submit():
            logger.log("Inputs confirmed. Sending analysis request...")
            st.rerun()
        else:
            logger.log(f"Analysis rejected: {analyzer.error_message}")

    # Step 2: the trigger above is rendered disabled while the single request runs
    if analyzer.is_loading:
        with st.spinner("Analyzing Match..."):
            analyzer.run_pending()
        if analyzer.result is not None:
            logger.log(f"Analysis complete. Overall score: {analyzer.result.overall_score}")
        else:
            logger.log(f"ERROR: {analyzer.error_message}")
        st.rerun()

    if analyzer.error_message:
        st.error(analyzer.error_message)

    if analyzer.result is not None:
        render_result(analyzer.result)

    if analyzer.result is not None or analyzer.error_message:
        if st.button("🔄 Start Over", key="start_over"):
            if analyzer.reset():
                logger.log("Starting over...")
            st.rerun()
