CSS_LOG = """
body {
    font-family: "DejaVu Sans Mono", "Menlo", monospace;
    background: #fafafa;
    color: #202124;
    max-width: 60em;
    margin: 2em auto;
}

section.section {
    margin-bottom: 1.2em;
    padding: 0.6em 1em;
    border-left: 4px solid #5b7db1;
    background: #ffffff;
}

section.section h3 { margin-top: 0.2em; }
.subsection h4 { color: #5b7db1; margin: 0.6em 0 0.2em; }

p.warning { color: #a15c00; }
p.error { color: #b00020; font-weight: bold; }
p.debug { color: #80868b; font-size: 0.9em; }

.result .label { font-weight: bold; }

.matrix-container pre {
    display: inline-block;
    padding: 0.4em 0.8em;
    background: #eef2f8;
}

.table-container table { border-collapse: collapse; margin: 0.4em 0; }
.table-container th { background: #eef2f8; }
.table-container th,
.table-container td { border: 1px solid #c5ccd6; padding: 2px 10px; text-align: right; }
"""
