import plotly.graph_objects as go

import app


def test_flesch_gauge():
    fig = app.create_flesch_gauge(72.345)
    assert isinstance(fig, go.Figure)
    assert fig.data[0].value == 72.3


def test_frequency_dataframe():
    df = app.frequency_dataframe([("the", 4), ("fox", 1)])
    assert list(df.columns) == ["Word", "Count"]
    assert df.iloc[0].tolist() == ["the", 4]


def test_frequency_bar_chart_puts_top_word_last():
    fig = app.create_frequency_bar_chart([("the", 4), ("fox", 1)])
    assert list(fig.data[0].y) == ["fox", "the"]
    assert list(fig.data[0].x) == [1, 4]


def test_sentiment_counts_chart():
    fig = app.sentiment_counts_chart(3, 1)
    assert list(fig.data[0].y) == [3, 1]
