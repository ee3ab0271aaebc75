"""
Renderizador markdown -> HTML ligero para el cuerpo de los posts.

No es CommonMark: es una lista ordenada de sustituciones de texto y el
orden importa (negrita antes que cursiva, cabeceras antes que párrafos...).
Lo que no reconoce pasa tal cual como texto literal.
"""
import re

FRONT_MATTER_RE = re.compile(r'\A---[\s\S]*?---\n')

HEADINGS = [
    (re.compile(r'^# ([^\r\n]*)', re.M), r'<h1>\1</h1>'),
    (re.compile(r'^## ([^\r\n]*)', re.M), r'<h2>\1</h2>'),
    (re.compile(r'^### ([^\r\n]*)', re.M), r'<h3>\1</h3>'),
    (re.compile(r'^#### ([^\r\n]*)', re.M), r'<h4>\1</h4>'),
]

BOLD_RE = re.compile(r'\*\*([^\r\n]*?)\*\*')
ITALIC_RE = re.compile(r'\*([^\r\n]*?)\*')
LINK_RE = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')
CODE_BLOCK_RE = re.compile(r'```[\s\S]*?```')
FENCE_RE = re.compile(r'```[A-Za-z0-9_]*\n?')
INLINE_CODE_RE = re.compile(r'`([^`]+)`')
BULLET_RE = re.compile(r'^- ([^\r\n]*)', re.M)
NUMBERED_RE = re.compile(r'^\d+\. ([^\r\n]*)', re.M)
LIST_ITEM_LINE_RE = re.compile(r'^<li>.*</li>\r?$')
HR_RE = re.compile(r'^---(?=\r|$)', re.M)

# Bloques que ya vienen envueltos y no deben ir dentro de <p>
BLOCK_PREFIXES = ('<h', '<ul', '<ol', '<pre', '<hr', '<p>')


def strip_front_matter(text):
    return FRONT_MATTER_RE.sub('', text, count=1)


def headings(text):
    for pattern, repl in HEADINGS:
        text = pattern.sub(repl, text)
    return text


def emphasis(text):
    text = BOLD_RE.sub(r'<strong>\1</strong>', text)
    return ITALIC_RE.sub(r'<em>\1</em>', text)


def links(text):
    return LINK_RE.sub(r'<a href="\2" target="_blank" rel="noopener noreferrer">\1</a>', text)


def _code_block(match):
    code = FENCE_RE.sub('', match.group(0)).replace('```', '')
    return f'<pre><code>{code}</code></pre>'


def code_blocks(text):
    return CODE_BLOCK_RE.sub(_code_block, text)


def inline_code(text):
    return INLINE_CODE_RE.sub(r'<code>\1</code>', text)


def _wrap(run):
    items = '\n'.join(run)
    # Con CRLF el \r final queda fuera del </ul>
    tail = '\r' if items.endswith('\r') else ''
    return '<ul>' + items[:len(items) - len(tail)] + '</ul>' + tail


def lists(text):
    text = BULLET_RE.sub(r'<li>\1</li>', text)
    text = NUMBERED_RE.sub(r'<li>\1</li>', text)

    # Cada tramo contiguo de <li> va en un único <ul>, sin distinguir el tipo
    out, run = [], []
    for line in text.split('\n'):
        if LIST_ITEM_LINE_RE.match(line):
            run.append(line)
            continue
        if run:
            out.append(_wrap(run))
            run = []
        out.append(line)
    if run:
        out.append(_wrap(run))
    return '\n'.join(out)


def paragraphs(text):
    chunks = []
    for chunk in text.split('\n\n'):
        chunk = chunk.strip()
        if not chunk or chunk == '---' or chunk.startswith(BLOCK_PREFIXES):
            chunks.append(chunk)
        else:
            chunks.append(f'<p>{chunk}</p>')
    return '\n'.join(chunks)


def rules(text):
    return HR_RE.sub('<hr>', text)


PIPELINE = (
    strip_front_matter,
    headings,
    emphasis,
    links,
    code_blocks,
    inline_code,
    lists,
    paragraphs,
    rules,
)


def render(markdown):
    html = markdown
    for step in PIPELINE:
        html = step(html)
    return html
