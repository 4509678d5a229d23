from ..config import SEASON_WRAP_CLASS
from ..models import ContentType
from ..page_data.html_query import HtmlQuery


def classify(document):
    """
    Movie atau Series? Halaman dianggap series jika ada minimal satu <a>
    di bawah elemen dengan class "season-wrap".

    Ini heuristik yang terikat ke markup situs sumber, bukan algoritma umum.
    """
    query = document if isinstance(document, HtmlQuery) else HtmlQuery(document)
    if query.anchors_under(SEASON_WRAP_CLASS):
        return ContentType.SERIES
    return ContentType.MOVIE
