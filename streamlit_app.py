# streamlit_app.py
import streamlit as st
import requests
import json
import pandas as pd
from io import BytesIO
from PIL import Image
from typing import Any, Optional

API_BASE = "http://127.0.0.1:8000"

EXAMPLE_TABLE = {
    "headers": ["Q1", "Q2", "Q3"],
    "rows": [[120, 98, 143], [87, 110, 131]],
}

st.set_page_config(page_title="Table to Image", layout="wide")
st.title("Table → Chart Image")
st.write("Paste table JSON (headers/rows, a list of records, or a 2D list) and render it as a chart image.")

# -------------------------
# Helpers
# -------------------------
def try_parse_json(raw: str) -> Optional[Any]:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return None

def preview_df(table: Any) -> Optional[pd.DataFrame]:
    """Best-effort DataFrame preview of the raw input; the server does the real normalization."""
    if isinstance(table, dict) and "headers" in table and "rows" in table:
        return pd.DataFrame(table["rows"], columns=table["headers"])
    if isinstance(table, list) and table and isinstance(table[0], dict):
        return pd.DataFrame(table)
    if isinstance(table, list) and table and isinstance(table[0], list):
        return pd.DataFrame(table[1:], columns=table[0])
    return None

def fetch_image(url: str) -> Image.Image:
    resp = requests.get(url, timeout=30)
    resp.raise_for_status()
    return Image.open(BytesIO(resp.content))

# -------------------------
# UI: options, input & call
# -------------------------
with st.sidebar:
    st.header("Options")
    fmt = st.selectbox("Format", ["png", "jpg", "svg"], index=0)
    width = st.number_input("Width", min_value=100, max_value=4096, value=800, step=50)
    height = st.number_input("Height", min_value=100, max_value=4096, value=600, step=50)
    style = st.selectbox("Style", ["default", "minimal", "dark", "light"], index=0)

raw = st.text_area("Table JSON", value=json.dumps(EXAMPLE_TABLE, indent=2), height=240)

if st.button("Generate Image"):
    table = try_parse_json(raw)
    if table is None:
        st.warning("Input is not valid JSON.")
        st.stop()

    try:
        df = preview_df(table)
    except ValueError as e:
        df = None
        st.info(f"Could not preview table: {e}")
    if df is not None:
        st.subheader("Data preview")
        st.dataframe(df.head(20))

    payload = {"table": table, "format": fmt, "width": int(width), "height": int(height), "style": style}
    with st.spinner("Generating chart image..."):
        try:
            resp = requests.post(f"{API_BASE}/convert", json=payload, timeout=60)
        except requests.RequestException as e:
            st.error("Failed to call API")
            st.exception(e)
            st.stop()

    if resp.status_code != 200:
        st.error(f"Backend returned error: {resp.status_code}")
        st.code(resp.text)
        st.stop()

    image_url = resp.json()["imageUrl"]
    st.subheader("Image URL")
    st.code(image_url, language=None)

    if fmt == "svg":
        # PIL cannot decode SVG; let the browser load it
        st.image(image_url)
    else:
        try:
            img = fetch_image(image_url)
            st.image(img, caption="Rendered chart", use_container_width=True)
        except (requests.RequestException, OSError) as e:
            st.error(f"Could not load image: {e}")
else:
    st.info("Edit the JSON above and click 'Generate Image'.")
