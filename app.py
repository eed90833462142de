"""
Text Analyzer - Streamlit front end
===================================
Paste text, get character/word counts, readability scores, a sentiment
reading and the most frequent words.

This module only renders results. All metrics come from the
``text_analyzer`` package; the progress bar is driven by the pipeline's
``on_progress`` callback.

Run:
    streamlit run app.py
"""

import logging
from typing import Dict, List, Tuple

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from text_analyzer import (AnalysisResult, AnalyzerConfig, MAX_TEXT_LENGTH,
                           MIN_TEXT_LENGTH, analyze_text)
from text_analyzer.logging_helper import setup_logging

logger = logging.getLogger(__name__)

# ============================================================================
# CONSTANTS AND CONFIGURATION
# ============================================================================

# Color scheme for the application
COLORS = {
    'positive': '#28a745',   # Green
    'neutral': '#6c757d',    # Gray
    'negative': '#dc3545',   # Red
    'primary': '#4a90d9',    # Blue
    'easy': '#d4edda',
    'standard': '#fff3cd',
    'hard': '#f8d7da'
}

SENTIMENT_LABELS = {
    'positive': "😊 Positive",
    'neutral': "😐 Neutral",
    'negative': "😟 Negative"
}

# ============================================================================
# VISUALIZATION HELPERS
# ============================================================================

def create_flesch_gauge(score: float) -> go.Figure:
    """
    Create a gauge chart for the Flesch Reading Ease score.

    The dial is clamped to 0-100 for display; the number shown is the
    raw score, which can fall outside that range for extreme texts.

    Args:
        score: Flesch Reading Ease score

    Returns:
        Plotly figure object
    """
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=round(score, 1),
        domain={'x': [0, 1], 'y': [0, 1]},
        title={'text': "Flesch Reading Ease", 'font': {'size': 20}},
        gauge={
            'axis': {'range': [0, 100], 'tickwidth': 1, 'tickcolor': "darkgray"},
            'bar': {'color': COLORS['primary']},
            'bgcolor': "white",
            'borderwidth': 2,
            'bordercolor': "gray",
            'steps': [
                {'range': [0, 30], 'color': COLORS['hard']},
                {'range': [30, 60], 'color': COLORS['standard']},
                {'range': [60, 100], 'color': COLORS['easy']}
            ]
        }
    ))

    fig.update_layout(
        height=280,
        margin=dict(l=20, r=20, t=50, b=20),
        paper_bgcolor='rgba(0,0,0,0)',
        font={'color': '#333', 'family': 'Arial'}
    )

    return fig


def frequency_dataframe(word_frequency: List[Tuple[str, int]]) -> pd.DataFrame:
    """Word/count table, most frequent first."""
    return pd.DataFrame(word_frequency, columns=['Word', 'Count'])


def create_frequency_bar_chart(word_frequency: List[Tuple[str, int]]) -> go.Figure:
    """
    Create a horizontal bar chart of the most frequent words.

    Args:
        word_frequency: (word, count) pairs, most frequent first

    Returns:
        Plotly figure object
    """
    df = frequency_dataframe(word_frequency)

    fig = go.Figure()
    fig.add_trace(go.Bar(
        # reversed so the most frequent word sits at the top
        y=df['Word'][::-1],
        x=df['Count'][::-1],
        orientation='h',
        marker=dict(color=COLORS['primary']),
        hovertemplate='%{y}: %{x}<extra></extra>'
    ))

    fig.update_layout(
        title=dict(text="Most Frequent Words", font=dict(size=18)),
        xaxis=dict(title="Occurrences"),
        yaxis=dict(title=""),
        height=max(250, 35 * len(df) + 80),
        margin=dict(l=120, r=20, t=50, b=40),
        paper_bgcolor='rgba(0,0,0,0)',
        showlegend=False
    )

    return fig


def sentiment_counts_chart(positive: int, negative: int) -> go.Figure:
    fig = go.Figure(go.Bar(
        x=['Positive words', 'Negative words'],
        y=[positive, negative],
        marker=dict(color=[COLORS['positive'], COLORS['negative']]),
        text=[positive, negative],
        textposition='outside'
    ))
    fig.update_layout(
        height=260,
        margin=dict(l=40, r=20, t=30, b=40),
        paper_bgcolor='rgba(0,0,0,0)',
        yaxis=dict(rangemode='tozero')
    )
    return fig

# ============================================================================
# TEST EXAMPLES
# ============================================================================

SAMPLE_TEXTS: Dict[str, str] = {
    "Simple and upbeat": """
The sun is out and the day is great. We had a wonderful walk in the park.
The kids were happy and the dog was glad to run.

We ate lunch by the lake. It was a pleasant and beautiful afternoon.
""",

    "Product complaint": """
I am disappointed with this blender. The motor failed after two weeks and the
lid is hard to close. Support was useless and the whole experience was
frustrating.

It is a waste of money. I would not buy it again.
""",

    "Dense academic prose": """
The epistemological ramifications of quantum mechanical indeterminacy necessitate
a fundamental reconceptualization of classical causality paradigms. Heisenberg's
uncertainty principle demonstrates that conjugate variables such as position and
momentum cannot be simultaneously determined with arbitrary precision, thereby
imposing intrinsic limitations on our predictive capabilities.

The decoherence program attempts to explain the emergence of classical behavior
from quantum substrates through environmental entanglement processes.
"""
}

# ============================================================================
# RESULT SECTIONS
# ============================================================================

def render_basic_metrics(result: AnalysisResult) -> None:
    basic = result.basic
    st.markdown("### 📏 Basic Metrics")
    cols = st.columns(6)
    cols[0].metric("Characters", f"{basic.char_count:,}")
    cols[1].metric("No Spaces", f"{basic.char_no_spaces_count:,}")
    cols[2].metric("Words", f"{basic.word_count:,}")
    cols[3].metric("Sentences", basic.sentence_count)
    cols[4].metric("Paragraphs", basic.paragraph_count)
    cols[5].metric("Avg Word Length", basic.avg_word_length)


def render_readability(result: AnalysisResult) -> None:
    readability = result.readability
    st.markdown("### 📖 Readability")
    col1, col2 = st.columns([1, 1])

    with col1:
        st.plotly_chart(create_flesch_gauge(readability.flesch_score),
                        use_container_width=True)

    with col2:
        st.metric("Flesch-Kincaid Grade", f"{readability.flesch_kincaid_grade:.1f}")
        st.metric("Coleman-Liau Index", f"{readability.coleman_liau_index:.1f}")
        st.metric("Grade Level", readability.grade_level)
        st.info(readability.interpretation)


def render_sentiment(result: AnalysisResult) -> None:
    sentiment = result.sentiment
    st.markdown("### 💬 Sentiment")
    col1, col2 = st.columns([1, 2])

    with col1:
        st.metric("Overall", SENTIMENT_LABELS[sentiment.sentiment])
        st.metric("Score", sentiment.score)

    with col2:
        st.plotly_chart(
            sentiment_counts_chart(sentiment.positive_count, sentiment.negative_count),
            use_container_width=True
        )


def render_word_frequency(result: AnalysisResult) -> None:
    st.markdown("### 🔤 Word Frequency")
    if not result.word_frequency:
        st.info("No words long enough to rank.")
        return

    col1, col2 = st.columns([2, 1])
    with col1:
        st.plotly_chart(create_frequency_bar_chart(result.word_frequency),
                        use_container_width=True)
    with col2:
        st.dataframe(frequency_dataframe(result.word_frequency),
                     use_container_width=True, hide_index=True)

# ============================================================================
# MAIN STREAMLIT APPLICATION
# ============================================================================

def main():
    """
    Main function to run the Text Analyzer Streamlit application.
    """
    setup_logging()

    st.set_page_config(
        page_title="Text Analyzer",
        page_icon="📝",
        layout="wide",
        initial_sidebar_state="expanded"
    )

    st.markdown("""
    <style>
        .main-header {
            text-align: center;
            padding: 1rem 0;
            margin-bottom: 2rem;
        }

        .main-header h1 {
            color: #4a90d9;
            font-size: 2.5rem;
            margin-bottom: 0.5rem;
        }

        .main-header p {
            color: #666;
            font-size: 1.1rem;
        }

        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        .stTextArea textarea {
            font-size: 14px;
            line-height: 1.6;
        }
    </style>
    """, unsafe_allow_html=True)

    st.markdown("""
    <div class="main-header">
        <h1>📝 Text Analyzer</h1>
        <p>Counts, readability and sentiment for any text</p>
    </div>
    """, unsafe_allow_html=True)

    # ========================================================================
    # SIDEBAR
    # ========================================================================

    with st.sidebar:
        st.markdown("### ⚙️ Settings")

        max_words = st.slider(
            "Words in frequency list", min_value=3, max_value=30, value=10,
            help="How many of the most frequent words to show"
        )
        min_word_length = st.slider(
            "Ignore words up to this length", min_value=0, max_value=6, value=2,
            help="Only words strictly longer than this are ranked"
        )

        st.markdown("---")

        st.markdown("### 📝 Sample Texts")
        sample_choice = st.selectbox(
            "Load a sample",
            ["-- Select --"] + list(SAMPLE_TEXTS.keys())
        )

        st.markdown("---")

        show_raw = st.checkbox(
            "Show raw results",
            value=False,
            help="Display the full result record as JSON"
        )

    # ========================================================================
    # INPUT
    # ========================================================================

    if 'text_input' not in st.session_state:
        st.session_state.text_input = ""

    if sample_choice != "-- Select --":
        st.session_state.text_input = SAMPLE_TEXTS[sample_choice].strip()

    text_input = st.text_area(
        "Paste your text below:",
        value=st.session_state.text_input,
        height=260,
        max_chars=MAX_TEXT_LENGTH,
        placeholder=f"Enter at least {MIN_TEXT_LENGTH} characters...",
        key="main_text_input"
    )
    st.caption(f"{len(text_input):,} / {MAX_TEXT_LENGTH:,} characters")

    analyze_clicked = st.button(
        "🔍 Analyze Text",
        type="primary",
        use_container_width=True
    )

    if not analyze_clicked:
        return

    # ========================================================================
    # ANALYSIS AND RESULTS
    # ========================================================================

    config = AnalyzerConfig(min_word_length=min_word_length,
                            max_frequency_words=max_words)
    progress = st.progress(0, text="Analyzing...")

    def on_progress(percent: int, stage: str) -> None:
        progress.progress(percent, text=stage.replace('_', ' ').title())

    try:
        result = analyze_text(text_input, config=config, on_progress=on_progress)
    except Exception:
        logger.exception("Analysis failed")
        st.error("An error occurred during analysis. Please try again.")
        return
    finally:
        progress.empty()

    if not result.ok:
        st.error(f"⚠️ {result.error_message}")
        return

    for warning in result.warnings:
        st.warning(f"⚠️ {warning}")

    st.markdown("---")
    render_basic_metrics(result)
    st.markdown("---")
    render_readability(result)
    st.markdown("---")
    render_sentiment(result)
    st.markdown("---")
    render_word_frequency(result)

    if show_raw:
        with st.expander("🔧 Raw Results"):
            st.json(result.as_dict())

# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    main()
