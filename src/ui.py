"""Gradio front-end: upload a tab-delimited file and check its addresses."""
import logging
import os
from dotenv import load_dotenv

import pandas as pd
import gradio as gr

from src.addrcheck.errors import AddressCheckError
from src.addrcheck.pipeline import check_file


logger = logging.getLogger("addrcheck.ui")

PREVIEW_ROWS = 20


def summarize(out_df: pd.DataFrame) -> str:
    total = len(out_df)
    if total == 0:
        return "Aucune ligne traitée."
    valid = int((out_df["adresse_valide"] == "true").sum())
    invalid = total - valid
    return "\n".join([
        f"Lignes vérifiées : {total}",
        f"Adresses valides : {valid} ({100 * valid / total:.1f}%)",
        f"Adresses non confirmées : {invalid} ({100 * invalid / total:.1f}%)",
    ])


def process_file(file, max_rows: int):
    """Run the checker on an uploaded file.

    Returns (output_path, summary, preview_df); errors are reported in the
    summary and the other outputs are left empty.
    """
    if file is None:
        return None, "Aucun fichier fourni.", None

    path = getattr(file, "name", file)
    try:
        output_path, written = check_file(path, int(max_rows), show_progress=False)
    except (OSError, AddressCheckError) as e:
        logger.warning("check of %s failed: %s", path, e)
        return None, f"Erreur : {e}", None

    # dtype=str keeps postal codes such as 01000 intact in the preview
    out_df = pd.read_csv(output_path, sep="\t", dtype=str, keep_default_na=False)
    logger.info("checked %d rows of %s", written, path)
    return output_path, summarize(out_df), out_df.head(PREVIEW_ROWS)


def build_app() -> gr.Blocks:
    with gr.Blocks(title="Adresse Checker") as demo:
        gr.Markdown("Vérification d'adresses\nChargez un fichier tabulé (`nom, adresse, cp, ville, contact`).")

        upload = gr.File(label="Fichier d'entrée (UTF-8, tabulation)")
        max_rows = gr.Slider(
            minimum=0,
            maximum=1000,
            step=1,
            value=50,
            label="Nombre de lignes à traiter",
        )
        btn = gr.Button("Vérifier")

        download = gr.File(label="Fichier vérifié (_chk)")
        summary = gr.Textbox(label="Résumé", lines=4)
        table = gr.Dataframe(label="Aperçu", interactive=False)

        btn.click(
            fn=process_file,
            inputs=[upload, max_rows],
            outputs=[download, summary, table],
        )
    return demo


def main():
    env_path = os.path.join(os.getcwd(), ".env")
    if os.path.exists(env_path):
        load_dotenv(env_path)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    build_app().launch()


if __name__ == "__main__":
    main()
