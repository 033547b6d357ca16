"""
QUOTE CATALOG

Static message bodies, one partition per occasion.
Entries are never mutated; selection always shuffles a copy.
"""

from typing import Dict, Tuple

from app.domain.errors import EmptyCatalogError
from app.domain.models.notification import Occasion


MORNING_QUOTES: Tuple[str, ...] = (
    "Selamat pagi! Awali hari dengan niat baik dan langkah yang mantap.",
    "Setiap pagi adalah kesempatan baru untuk menjadi lebih baik dari kemarin.",
    "Kesuksesan bukan milik mereka yang menunggu, tapi milik mereka yang bergerak.",
    "Jangan hitung harinya, buat harinya berarti.",
    "Kerja keras hari ini adalah senyum bahagia di hari esok.",
    "Mulailah dari mana kamu berada, gunakan apa yang kamu punya, lakukan apa yang kamu bisa.",
    "Disiplin adalah jembatan antara tujuan dan pencapaian.",
    "Semangat pagi! Satu langkah kecil hari ini tetap lebih baik daripada diam.",
    "Tidak ada usaha yang sia-sia, semua akan indah pada waktunya.",
    "Fokus pada tujuan, bukan pada rintangan.",
    "Mimpi tidak akan terwujud dengan sendirinya, bangun dan kejarlah.",
    "Hari ini adalah hadiah, karena itu disebut present.",
    "Orang hebat tidak dihasilkan dari kemudahan, tapi dari kesulitan.",
    "Percaya pada prosesnya, hasil tidak akan mengkhianati usaha.",
    "Tetap rendah hati, bekerja keras, dan bersikap baik.",
    "Jadikan hari ini lebih produktif dari kemarin.",
    "Yang membedakan kita hanyalah seberapa besar kita mau berusaha.",
    "Keberhasilan adalah jumlah dari usaha kecil yang diulang setiap hari.",
    "Bersyukur di pagi hari membuat segalanya terasa lebih ringan.",
    "Ayo semangat, tim hebat lahir dari kerja sama yang kuat!",
    "Bukan seberapa cepat kamu sampai, tapi seberapa konsisten kamu melangkah.",
    "Tantangan hari ini adalah kekuatan untuk hari esok.",
    "Senyum dulu, lalu taklukkan hari ini.",
    "Pagi yang baik dimulai dengan pikiran yang positif.",
    "Kamu lebih kuat dari yang kamu kira. Semangat!",
)

EVENING_QUOTES: Tuple[str, ...] = (
    "Terima kasih untuk kerja kerasnya hari ini. Saatnya beristirahat.",
    "Istirahatlah, besok kita lanjutkan perjuangan dengan energi baru.",
    "Malam adalah waktu terbaik untuk bersyukur atas semua pencapaian hari ini.",
    "Tidak apa-apa jika hari ini belum sempurna, besok masih ada kesempatan.",
    "Tidur yang cukup adalah bagian dari persiapan menuju kemenangan.",
    "Evaluasi hari ini, rencanakan esok, lalu tidurlah dengan tenang.",
    "Setiap hari yang dilewati membawa kita lebih dekat ke tujuan.",
    "Banggalah pada dirimu, kamu sudah berusaha sebaik mungkin hari ini.",
    "Lelah hari ini adalah investasi untuk keberhasilan nanti.",
    "Selamat malam. Semoga mimpi indah mengisi tidurmu.",
    "Hari yang berat akan membuat kita lebih kuat.",
    "Lepaskan penat, tenangkan pikiran, dan sambut esok dengan semangat.",
    "Proses tidak pernah mengkhianati hasil. Istirahat yang cukup ya.",
    "Jangan lupa bersyukur untuk hal-hal kecil yang terjadi hari ini.",
    "Malam ini istirahat, besok kembali berlari.",
    "Kesabaran dan ketekunan akan membuahkan hasil yang manis.",
    "Setiap langkah hari ini berarti, sekecil apa pun itu.",
    "Kebersamaan kita adalah kekuatan terbesar. Selamat beristirahat, tim!",
    "Tutup hari ini dengan senyuman dan doa yang baik.",
    "Semakin dekat dengan hari H, tetap jaga kesehatan ya.",
    "Keberhasilan besar dibangun dari hari-hari yang dijalani dengan sungguh-sungguh.",
    "Biarkan malam memulihkan tenagamu untuk perjuangan esok hari.",
    "Hari ini sudah selesai, tapi semangat kita belum.",
    "Terima kasih sudah bertahan dan berjuang sampai hari ini.",
    "Besok adalah halaman baru. Tidurlah yang nyenyak.",
)

QUOTES: Dict[Occasion, Tuple[str, ...]] = {
    Occasion.MORNING: MORNING_QUOTES,
    Occasion.EVENING: EVENING_QUOTES,
}


def get_quotes(occasion: Occasion) -> Tuple[str, ...]:
    """Return the catalog for an occasion; an empty one is a configuration error."""
    quotes = QUOTES.get(Occasion(occasion), ())
    if not quotes:
        raise EmptyCatalogError(Occasion(occasion).value)
    return quotes
