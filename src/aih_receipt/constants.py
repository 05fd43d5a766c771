"""Constants for aih-receipt."""


class Gray:
    """Gray levels (0-255) used on the receipt."""

    BORDER = 204
    COPY_LABEL = 128
    CUT_LINE = 179
    CUT_CAPTION = 153


# Page geometry (points, A4 portrait)
PAGE_WIDTH = 595.28
PAGE_HEIGHT = 841.89
COPY_HEIGHT = 420.94
MARGIN = 30
CONTENT_WIDTH = PAGE_WIDTH - MARGIN * 2

FONT_FAMILY = "helvetica"

# Header block
HEADER_TOP = 361
HEADER_PITCH = 11
LOGO_HEIGHT = 45
LOGO_GUTTER = 15

HEADER_LINES = [
    "Prefeitura Municipal de Itabuna",
    "Secretaria de Saúde",
    "Departamento de Regulação e Controle e Avaliação do S.U.S.",
    "Setor de Autorizações de Internamento Hospitalar (A.I.H)",
]

TITLE = "Comprovante de Entrega de Documentos no Setor de A.I.H"

# Procedure block
MAX_PROCEDURE_LINES = 3
PROCEDURE_PITCH = 11

# Origin checkboxes
CHECKBOX_SIZE = 10
ORIGIN_COLUMN = 100
INFO_COLUMN = 250

ITABUNA_LABEL = "ITABUNA"
M_PACTUADO_LABEL = "M. PACTUADO"

# Signature block
SIGNATURE_Y = 130
SIGNATURE_WIDTH = 250
SIGNATURE_CAPTIONS = [
    "Equipe Administrativa",
    "(Setor A.I.H de Cirurgias Eletivas)",
]

# Footnotes
NOTES_Y = 80
NOTES_FONT_SIZE = 7
NOTES_PITCH = 8
NOTES_GAP = 2

NOTES = [
    "a- Comparecer pessoalmente - a partir das 10h (excepcionalmente) - da quarta-feira ou "
    "sexta-feira seguinte, após entrega da documentação, para saber se já está autorizada a "
    "cirurgia eletiva.",
    "b- Ressaltamos que o prazo para dar retorno ao paciente informado se foi ou não autorizado "
    "o procedimento cirúrgico pelo médico autorizador, é de 15 (quinze) dias após recebimento da "
    "documentação, pertinente à cirurgia eletiva em questão, no setor de A.I.H.",
    "c- Guarde este comprovante e traga-o quando for pegar a autorização dentro do horário de "
    "atendimento das 07h00 às 13h00.",
]

# Copy labels
UPPER_COPY_LABEL = "1ª VIA - SETOR A.I.H"
LOWER_COPY_LABEL = "2ª VIA - PACIENTE"

CUT_LINE_CAPTION = "LINHA DE CORTE"
CUT_LINE_DASH = 4

FILENAME_PREFIX = "comprovante-aih-"
