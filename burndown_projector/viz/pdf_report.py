# burndown_projector/viz/pdf_report.py
from __future__ import annotations
import os, datetime
from typing import Dict, List
import pandas as pd

from ..utils.logging_utils import get_logger

log = get_logger()

PRIMARY  = "#5B8FF9"
ACCENT   = "#5AD8A6"
MUTED    = "#A7B0C8"
PANEL    = "#12172B"
INK      = "#0E122B"
TEXT     = "#EAF0FF"

def _fmt(v) -> str:
    if v is None:
        return "n/a"
    if isinstance(v, float):
        return f"{v:.2f}"
    return str(v)

def build_pdf(title: str,
              summary: Dict[str, object],
              charts: List[str],
              tables: Dict[str, pd.DataFrame],
              out_path: str) -> str:
    """
    One report per projection:
      - title + timestamp
      - summary cards (3 per row)
      - charts, full width
      - tables (daily projection...)
    If reportlab fails, writes <base>_summary.csv and <base>_fallback.txt instead.
    """
    try:
        from reportlab.lib.pagesizes import A4
        from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
        from reportlab.platypus import (SimpleDocTemplate, Paragraph, Spacer,
                                        Image, Table, TableStyle, PageBreak)
        from reportlab.lib import colors
        from reportlab.lib.units import cm

        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)

        def _header_footer(c, doc):
            w, h = doc.pagesize
            c.setFillColor(colors.HexColor(INK))
            c.rect(0, 0, w, h, fill=1, stroke=0)
            c.setFillColor(colors.HexColor(PANEL))
            c.rect(0, h-1.4*cm, w, 1.4*cm, fill=1, stroke=0)
            c.setFillColor(colors.HexColor(TEXT))
            c.setFont("Helvetica-Bold", 11)
            c.drawString(1.5*cm, h-0.9*cm, title)
            c.setFillColor(colors.HexColor(PANEL))
            c.rect(0, 0, w, 1.0*cm, fill=1, stroke=0)
            c.setFillColor(colors.HexColor(MUTED))
            c.setFont("Helvetica", 9)
            c.drawRightString(w-1.2*cm, 0.5*cm, f"Page {doc.page}")

        doc = SimpleDocTemplate(out_path, pagesize=A4,
                                leftMargin=1.5*cm, rightMargin=1.5*cm,
                                topMargin=2.6*cm, bottomMargin=1.6*cm)

        styles = getSampleStyleSheet()
        H1 = ParagraphStyle("H1", parent=styles["Title"], fontName="Helvetica-Bold",
                            fontSize=22, textColor=colors.HexColor(TEXT))
        H2 = ParagraphStyle("H2", parent=styles["Heading2"], fontName="Helvetica-Bold",
                            textColor=colors.white, backColor=colors.HexColor(PANEL), spaceAfter=6)
        P  = ParagraphStyle("P", parent=styles["BodyText"], fontName="Helvetica",
                            textColor=colors.HexColor(TEXT))

        story: List = []
        story += [Paragraph(title, H1), Spacer(1, 8)]
        story += [Paragraph(datetime.datetime.now().strftime("Generated on %Y-%m-%d %H:%M"), P),
                  Spacer(1, 18)]
        story += [Paragraph("Summary", H2), Spacer(1, 4)]

        cards = []
        for k, v in summary.items():
            if isinstance(v, dict):
                continue
            cell = [[Paragraph(f"<b>{k.replace('_', ' ').title()}</b>", P)],
                    [Paragraph(f"<para color='{ACCENT}'><b>{_fmt(v)}</b></para>", P)]]
            tbl = Table(cell, colWidths=[5.8*cm])
            tbl.setStyle(TableStyle([
                ("BACKGROUND",(0,0),(-1,-1), colors.HexColor(PANEL)),
                ("BOX",(0,0),(-1,-1), 0.7, colors.HexColor(PRIMARY)),
                ("LEFTPADDING",(0,0),(-1,-1), 6),
                ("RIGHTPADDING",(0,0),(-1,-1), 6),
                ("VALIGN",(0,0),(-1,-1),"MIDDLE"),
            ]))
            cards.append(tbl)
        for i in range(0, len(cards), 3):
            row = cards[i:i+3]
            t = Table([row], colWidths=[6.0*cm]*len(row))
            t.setStyle(TableStyle([("ALIGN",(0,0),(-1,-1),"LEFT"), ("VALIGN",(0,0),(-1,-1),"TOP")]))
            story += [t, Spacer(1, 8)]

        charts = [p for p in (charts or []) if p and os.path.exists(p)]
        if charts:
            story += [Spacer(1, 8), Paragraph("Charts", H2), Spacer(1, 8)]
            for p in charts:
                story += [Image(p, width=17*cm, height=9.3*cm), Spacer(1, 8)]

        for name, df in (tables or {}).items():
            if df is None or df.empty:
                continue
            story += [PageBreak(), Paragraph(name, H2), Spacer(1, 6)]
            dat = [df.columns.tolist()] + df.astype(str).values.tolist()
            tt = Table(dat, hAlign="LEFT", repeatRows=1)
            tt.setStyle(TableStyle([
                ("BACKGROUND",(0,0),(-1,0), colors.HexColor(PRIMARY)),
                ("TEXTCOLOR",(0,0),(-1,0), colors.white),
                ("GRID",(0,0),(-1,-1), 0.25, colors.HexColor(MUTED)),
                ("TEXTCOLOR",(0,1),(-1,-1), colors.HexColor(TEXT)),
                ("ROWBACKGROUNDS",(0,1),(-1,-1), [colors.HexColor(PANEL), colors.HexColor("#0F1530")]),
                ("FONTSIZE",(0,0),(-1,-1), 8),
                ("LEFTPADDING",(0,0),(-1,-1), 5),
                ("RIGHTPADDING",(0,0),(-1,-1), 5),
            ]))
            story += [tt]

        doc.build(story, onFirstPage=_header_footer, onLaterPages=_header_footer)
        return out_path

    except Exception as e:
        log.warning(f"PDF build failed, writing fallback summary: {e}")
        base = os.path.splitext(out_path)[0]
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
        flat = {k: v for k, v in summary.items() if not isinstance(v, dict)}
        pd.DataFrame([flat]).to_csv(base + "_summary.csv", index=False)
        with open(base + "_fallback.txt", "w", encoding="utf-8") as f:
            f.write(f"{title}\n\n{e}\n")
        return base + "_fallback.txt"
