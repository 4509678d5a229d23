from bs4 import BeautifulSoup

from ..models import NavRef

ACTIVE_CLASSES = {"active", "is-active", "current"}


def make_soup(html):
    """Parse HTML secara permisif; markup rusak tidak membuat error."""
    return BeautifulSoup(html, "lxml")


class HtmlQuery:
    """
    Antarmuka query HTML (tag + class-contains + atribut) supaya logika
    scraping tidak bergantung langsung pada library parser.
    """

    def __init__(self, html=None, soup=None):
        if soup is None:
            soup = make_soup(html or "")
        self.soup = soup

    def find_by_id(self, tag, element_id):
        return self.soup.find(tag, id=element_id)

    def anchors_under(self, class_token):
        """Semua <a> yang merupakan anak langsung dari elemen yang class-nya mengandung class_token."""
        return self.soup.select(f'[class*="{class_token}"] > a')

    def nav_refs_under(self, class_token, base_url, resolve):
        """
        Daftar NavRef dari anchor di bawah class_token. Anchor tanpa href dilewati.
        Link dianggap aktif jika punya class di ACTIVE_CLASSES atau atribut aria-current.
        """
        refs = []
        for anchor in self.anchors_under(class_token):
            href = (anchor.get("href") or "").strip()
            if not href:
                continue
            classes = anchor.get("class") or []
            is_active = bool(ACTIVE_CLASSES & set(classes)) or anchor.has_attr("aria-current")
            refs.append(NavRef(
                name=anchor.get_text().strip(),
                url=resolve(base_url, href),
                is_active=is_active,
            ))
        return refs
