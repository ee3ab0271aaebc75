import logging

logger = logging.getLogger(__name__)

DELIMITER = '---'
QUOTES = ('"', "'")


def _strip_quotes(value):
    if len(value) >= 2 and value[0] in QUOTES and value[-1] in QUOTES:
        return value[1:-1]
    return value


def extract(raw):
    """
    Separa el bloque de frontmatter del cuerpo.

    Devuelve (metadata, body). Sin bloque `---` de apertura y cierre el
    mapping queda vacío y el cuerpo es el texto completo, sin tocar.
    """
    lines = raw.split('\n')
    if lines[0] != DELIMITER:
        return {}, raw

    try:
        end = lines.index(DELIMITER, 1)
    except ValueError:
        logger.debug("Frontmatter sin delimitador de cierre, se ignora")
        return {}, raw

    metadata = {}
    for line in lines[1:end]:
        key, sep, value = line.partition(':')
        if not sep or not key:
            continue
        metadata[key.strip()] = _strip_quotes(value.strip())

    return metadata, '\n'.join(lines[end + 1:])


def _needs_quotes(value):
    return value != value.strip() or _strip_quotes(value) != value


def dump(metadata, body=''):
    """Serializa metadata + body con el mismo formato que lee extract()."""
    if not metadata:
        return body

    out = [DELIMITER]
    for key, value in metadata.items():
        value = str(value)
        if _needs_quotes(value):
            value = f'"{value}"'
        out.append(f"{key}: {value}")
    out.append(DELIMITER)
    return '\n'.join(out) + '\n' + body
