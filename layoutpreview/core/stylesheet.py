"""The stylesheet shared by the generated document and the standalone CSS."""

from __future__ import annotations

import re
from typing import Mapping

from .models import DEFAULT_COLORS, DEFAULT_FONTS

# Characters that would let a token escape its declaration or the <style> element.
_UNSAFE_TOKEN_CHARS = re.compile(r"[<>{};]")


def css_token(value: str) -> str:
    return _UNSAFE_TOKEN_CHARS.sub("", value).strip()


def build_stylesheet(colors: Mapping[str, str], fonts: Mapping[str, str]) -> str:
    primary = css_token(colors.get("primary", DEFAULT_COLORS["primary"]))
    secondary = css_token(colors.get("secondary", DEFAULT_COLORS["secondary"]))
    accent = css_token(colors.get("accent", DEFAULT_COLORS["accent"]))
    background = css_token(colors.get("background", DEFAULT_COLORS["background"]))
    text = css_token(colors.get("text", DEFAULT_COLORS["text"]))
    body_font = css_token(fonts.get("body", DEFAULT_FONTS["body"]))
    return f"""* {{ margin: 0; padding: 0; box-sizing: border-box; }}
body {{
  font-family: {body_font};
  background-color: {background};
  color: {text};
  line-height: 1.6;
}}
.container {{ max-width: 1200px; margin: 0 auto; padding: 20px; }}
.header {{
  background: {primary};
  color: white;
  padding: 20px;
  border-radius: 12px;
  margin-bottom: 30px;
  box-shadow: 0 4px 20px rgba(0,0,0,0.1);
}}
.header h1 {{ color: white; margin-bottom: 10px; font-size: 2.5rem; }}
.header p {{ opacity: 0.9; font-size: 1.1rem; }}
.components {{ display: grid; gap: 30px; margin-top: 30px; }}
.component {{
  background: white;
  padding: 30px;
  border-radius: 12px;
  box-shadow: 0 4px 20px rgba(0,0,0,0.08);
  border-left: 5px solid {primary};
  transition: transform 0.3s ease, box-shadow 0.3s ease;
}}
.component:hover {{
  transform: translateY(-2px);
  box-shadow: 0 8px 30px rgba(0,0,0,0.12);
}}
.component h2 {{
  color: {primary};
  margin-bottom: 15px;
  font-size: 1.8rem;
  font-weight: 600;
}}
.component h3 {{
  color: {secondary};
  margin-bottom: 10px;
  font-size: 1.2rem;
}}
.component p {{
  color: #6B7280;
  margin-bottom: 15px;
  line-height: 1.7;
}}
.hero-section {{
  background: linear-gradient(135deg, {primary}, {secondary});
  color: white;
  padding: 60px 30px;
  text-align: center;
  border-radius: 15px;
  margin: 20px 0;
}}
.hero-title {{
  font-size: 3rem;
  font-weight: bold;
  margin-bottom: 20px;
}}
.hero-subtitle {{
  font-size: 1.3rem;
  margin-bottom: 30px;
  opacity: 0.9;
}}
.cta-button {{
  background: white;
  color: {primary};
  padding: 15px 30px;
  border: none;
  border-radius: 50px;
  font-size: 1.1rem;
  font-weight: 600;
  cursor: pointer;
  transition: all 0.3s ease;
}}
.cta-button:hover {{
  transform: translateY(-2px);
  box-shadow: 0 10px 25px rgba(0,0,0,0.2);
}}
.nav-links {{
  display: flex;
  gap: 20px;
  margin-top: 15px;
  flex-wrap: wrap;
}}
.nav-links a {{
  color: white;
  text-decoration: none;
  padding: 8px 16px;
  border-radius: 20px;
  background: rgba(255,255,255,0.1);
  transition: background 0.3s ease;
}}
.nav-links a:hover {{
  background: rgba(255,255,255,0.2);
}}
.card-grid {{
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(250px, 1fr));
  gap: 20px;
  margin: 20px 0;
}}
.card {{
  background: white;
  border-radius: 12px;
  box-shadow: 0 4px 15px rgba(0,0,0,0.1);
  overflow: hidden;
  transition: transform 0.3s ease;
}}
.card:hover {{
  transform: translateY(-5px);
}}
.card-image {{
  width: 100%;
  height: 200px;
  background: linear-gradient(45deg, #f0f0f0, #e0e0e0);
  display: flex;
  align-items: center;
  justify-content: center;
  color: #999;
  font-size: 0.9rem;
}}
.card-content {{
  padding: 20px;
}}
.card-title {{
  font-weight: 600;
  margin-bottom: 10px;
  color: {primary};
}}
.card-description {{
  color: #6B7280;
  font-size: 0.9rem;
}}
.footer {{
  background: #1F2937;
  color: white;
  padding: 40px 30px;
  text-align: center;
  margin-top: 40px;
  border-radius: 15px;
}}
.footer-links {{
  margin: 20px 0;
  display: flex;
  justify-content: center;
  gap: 30px;
  flex-wrap: wrap;
}}
.footer-links a {{
  color: white;
  text-decoration: none;
  transition: color 0.3s ease;
}}
.footer-links a:hover {{
  color: {accent};
}}
.social-links {{
  margin: 20px 0;
  display: flex;
  justify-content: center;
  gap: 15px;
}}
.social-links a {{
  color: white;
  text-decoration: none;
  padding: 10px;
  border-radius: 50%;
  background: rgba(255,255,255,0.1);
  transition: background 0.3s ease;
}}
.social-links a:hover {{
  background: {primary};
}}
@media (max-width: 768px) {{
  .container {{ padding: 10px; }}
  .components {{ grid-template-columns: 1fr; }}
  .hero-title {{ font-size: 2rem; }}
  .nav-links {{ justify-content: center; }}
  .footer-links {{ flex-direction: column; gap: 15px; }}
}}
"""
