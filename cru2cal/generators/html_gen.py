import os


class ChartGenerator:
    """Horizontalni bar grafikon u samostalnom HTML fajlu.

    rows je lista (oznaka, vrijednost) parova, vec sortirana."""

    def __init__(self, rows, title, value_label, unit="", max_value=None):
        self.rows = rows
        self.title = title
        self.value_label = value_label
        self.unit = unit
        values = [value for _, value in rows]
        self.max_value = max_value if max_value else (max(values) if values else 1)

    def generate(self):
        html = f"""
        <!DOCTYPE html>
        <html lang="fr">
        <head>
            <meta charset="UTF-8">
            <title>{self.title}</title>
            <style>
                body {{ font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; margin: 20px; background-color: #f4f4f9; }}
                h1 {{ color: #333; }}
                .section {{ margin-bottom: 30px; background: #fff; padding: 20px; border-radius: 8px; box-shadow: 0 2px 5px rgba(0,0,0,0.05); }}
                table {{ width: 100%; border-collapse: collapse; margin-top: 10px; }}
                th, td {{ padding: 8px 15px; text-align: left; border-bottom: 1px solid #ddd; }}
                th {{ background-color: #f8f9fa; font-weight: 600; color: #444; }}
                td.label {{ width: 80px; font-weight: bold; }}
                td.value {{ width: 120px; text-align: right; }}
                .bar {{ height: 18px; background-color: rgba(75, 192, 192, 0.6); border: 1px solid rgba(75, 192, 192, 1); border-radius: 3px; }}
            </style>
        </head>
        <body>
            <h1>{self.title}</h1>
            <div class='section'><table>
            <thead><tr><th>Salle</th><th>{self.value_label}</th><th></th></tr></thead><tbody>
        """

        for label, value in self.rows:
            width = min(100.0, value / self.max_value * 100) if self.max_value else 0
            shown = f"{value:.2f}" if isinstance(value, float) else str(value)
            html += f"""
                <tr>
                    <td class="label">{label}</td>
                    <td class="value">{shown}{self.unit}</td>
                    <td><div class="bar" style="width: {width:.1f}%"></div></td>
                </tr>
            """

        html += "</tbody></table></div></body></html>"
        return html

    def write(self, path):
        directory = os.path.dirname(path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.generate())
