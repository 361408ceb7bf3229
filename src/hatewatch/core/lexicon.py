"""Lexicon tables for the Indonesian comment classifiers.

Every rule-based classifier reads its keywords and patterns from this module,
so a term added here takes effect at every call site. Plain words match as
substrings of the lowercased comment; entries written as regex fragments
(word boundaries, lookaheads) keep short words from matching inside longer,
unrelated ones.
"""

import re
from typing import Dict, List, Pattern, Sequence


def terms_pattern(terms: Sequence[str]) -> Pattern:
    """Compile an alternation of regex fragments."""
    return re.compile("|".join(f"(?:{t})" for t in terms))


# --- Sentiment ---

HATE_KEYWORDS = [
    "bangsat", "anjing", "babi", "kampret", "goblok", "tolol", "bodoh",
    "sialan", "idiot", "dungu", "brengsek", "bajingan", "keparat",
    "menyebalkan", "tidak berguna", "dienyahkan",
]

POSITIVE_KEYWORDS = [
    "bagus", "baik", "hebat", "mantap", "keren", "setuju", "inspiratif",
    "menginspirasi", "terima kasih", "bermanfaat", "menarik", "luar biasa",
]

# Hate categories, checked in this order
SARA_TERMS = [
    "agama", "islam", "kristen", "katolik", "hindu", "budha", "yahudi",
    "kafir", "muslim", "suku", "pribumi",
]
INSULT_TERMS = ["bodoh", "tolol", "goblok", "bangsat", "anjing", "babi", "idiot", "dungu"]
PROVOCATION_TERMS = ["bunuh", "hancurkan", "serang", "perang", "lawan", "bakar", "usir", "ganyang"]

SARA_PATTERN = terms_pattern(SARA_TERMS)
INSULT_PATTERN = terms_pattern(INSULT_TERMS)
PROVOCATION_PATTERN = terms_pattern(PROVOCATION_TERMS)


# --- ITE violation types (one per comment) ---

DEFAMATION_PATTERN = terms_pattern([
    "fitnah", "mencemarkan", "merusak nama", "mempermalukan", "menghina", "menjelekkan",
])
BLASPHEMY_PATTERN = terms_pattern([
    "menista", "menghina agama", "menghina tuhan", "menghina nabi", "kafir", "sesat",
])
INCITEMENT_PATTERN = terms_pattern([
    "menghasut", r"\bayo\b", r"\bmari\b", r"\bkita\b", "serang", "bunuh",
    "hancurkan", "lawan", "perang", "revolusi",
])
HOAX_PATTERN = terms_pattern([
    "hoax", "hoaks", "bohong", "palsu", r"\bisu\b", "kabar burung", "berita palsu",
    "informasi salah", "menyesatkan",
])
UNPLEASANT_PATTERN = terms_pattern([
    "mengganggu", "tidak pantas", "tidak sopan", "tidak menyenangkan", "meresahkan",
])

ITE_VIOLATION_LABELS = {
    "defamation": "Pencemaran Nama Baik",
    "blasphemy": "Penistaan Agama",
    "incitement": "Menghasut",
    "hoax": "Penyebaran Berita Bohong",
    "unpleasant_acts": "Perbuatan Tidak Menyenangkan",
}


# --- UU ITE articles ---

UITE_INSULT_PATTERN = terms_pattern([
    "bangsat", "anjing", "babi", "kampret", "goblok", "tolol", "bodoh",
    "sialan", "sampah", r"\btai\b", "setan",
])
UITE_SARA_PATTERN = terms_pattern([
    "kafir", "kristen", "islam", "hindu", "budha", "yahudi", "pribumi",
    r"\bcina\b", r"\barab\b", r"\bjawa\b", "batak", "dayak", "padang",
])
UITE_VIOLENCE_PATTERN = terms_pattern([
    "bunuh", "matikan", "hancurkan", "serang", "hajar", r"\bbom\b", "teror",
    "bakar", "lempar", r"pukul(?!\s*\d)",
])
UITE_THREAT_PATTERN = terms_pattern([
    "ancam", "teror", "bongkar", "sebar", "foto", "video", "rahasia", "uang", "bayar",
])
UITE_CONDITIONAL_PATTERN = terms_pattern([r"\batau\b", r"\bjika\b", r"\bkalau\b", r"\bkecuali\b"])
UITE_HOAX_PATTERN = terms_pattern([
    "hoax", "hoaks", "bohong", "palsu", "fitnah", r"\bisu\b", "kabar", "berita",
])
UITE_POLITICAL_PATTERN = terms_pattern(["pemerintah", "presiden", "menteri", "politik"])

NO_VIOLATION_DESCRIPTION = "Tidak terdeteksi pelanggaran UU ITE yang signifikan."

ARTICLE_LABELS = {
    "27(3)": "Pasal 27 ayat (3)",
    "28(2)": "Pasal 28 ayat (2)",
    "45A(2)": "Pasal 45A ayat (2)",
    "27(4)": "Pasal 27 ayat (4)",
    "28(1)": "Pasal 28 ayat (1)",
}


# --- Speech acts ---

DIRECTIVE_PATTERN = terms_pattern([
    "harus", "jangan", "tolong", "silakan", "silahkan", r"\bcoba\b", "lakukan",
    "berhenti", r"\bdiam\b", r"\bpergi\b", r"keluar(?!ga)",
])
VIOLENT_IMPERATIVE_PATTERN = terms_pattern(["bunuh", "serang", "hajar", "hancurkan", "musnahkan", "basmi"])

COMMISSIVE_PATTERN = terms_pattern([
    r"\bakan\b", r"\bbakal\b", r"\bpasti\b", "berjanji", r"jamin\b", r"\bnanti\b", "suatu saat",
])
REVENGE_PATTERN = terms_pattern(["balas", "dendam", "hancurkan", "bunuh", "selesaikan", "hajar"])

EXPRESSIVE_NEGATIVE_PATTERN = terms_pattern([
    "bangsat", "tolol", "goblok", "bodoh", "sialan", "benci", "muak", "jijik", "brengsek",
])
EXPRESSIVE_POSITIVE_PATTERN = terms_pattern([
    "senang", "bahagia", "gembira", "mantap", "keren", "hebat", "bagus", "terima kasih",
])

DECLARATIVE_PATTERN = re.compile(
    r"\b(?:kamu|dia|mereka|ini|itu)\s+(?:adalah|itu|merupakan|termasuk|bukan)\b"
)
EXCLUSION_PATTERN = terms_pattern([
    "bukan bagian", "diusir", "terbuang", "dikucilkan", "tidak pantas", "tidak layak",
])

ACCUSATION_PATTERN = terms_pattern(["fitnah", "tuduh", "dusta", "bohong", "palsu", "salah"])


# --- Topic clustering ---

STOPWORDS = frozenset([
    "yang", "dan", "di", "ke", "dari", "dalam", "untuk", "pada", "dengan", "adalah", "ini", "itu",
    "tidak", "akan", "ada", "atau", "juga", "oleh", "sudah", "dapat", "bila", "jika", "karena",
    "saya", "kamu", "dia", "kita", "mereka", "kami", "nya", "mu", "ku", "an", "kan", "lah",
])

# Canonical topic table, checked in declaration order. Multi-word entries
# match against the whole comment, single words against its tokens.
TOPIC_KEYWORDS: Dict[str, List[str]] = {
    # Politik
    "Politik Pemilu & Partai": ["pemilu", "pilpres", "pileg", "pilkada", "partai", "caleg", "capres", "kampanye", "koalisi"],
    "Politik Pemerintahan": ["presiden", "menteri", "gubernur", "walikota", "bupati", "kabinet", "kementerian", "dpr", "dprd", "jokowi", "prabowo"],
    "Politik Kebijakan": ["kebijakan", "regulasi", "undang", "peraturan", "aturan", "reformasi", "perda"],
    "Korupsi & Hukum Politik": ["korupsi", "kpk", "suap", "gratifikasi", "hukum", "pengadilan", "jaksa", "polisi"],

    # Ekonomi
    "Ekonomi Makro": ["inflasi", "deflasi", "resesi", "gdp", "pertumbuhan", "ekonomi", "investasi", "ekspor", "impor"],
    "Harga & Subsidi": ["harga", "mahal", "murah", "bbm", "lpg", "listrik", "subsidi", "tarif", "biaya", "pajak"],
    "Keuangan & Perbankan": ["bank", "kredit", "pinjaman", "bunga", "rupiah", "dolar", "uang", "saham", "bursa"],
    "UMKM & Lapangan Kerja": ["umkm", "usaha", "bisnis", "wirausaha", "kerja", "pengangguran", "gaji", "upah", "tenaga"],

    # Sosial
    "Kemiskinan & Kesejahteraan": ["miskin", "kemiskinan", "bantuan", "sosial", "sembako", "kesejahteraan", "rakyat"],
    "Kriminalitas & Keamanan": ["kriminal", "kejahatan", "pencurian", "perampokan", "pembunuhan", "keamanan", "rawan"],
    "Budaya & Tradisi": ["budaya", "tradisi", "adat", "warisan", "kesenian", "seni", "tari", "musik"],
    "Keluarga & Pernikahan": ["keluarga", "nikah", "pernikahan", "cerai", "perceraian", "anak", "ibu", "ayah"],

    # Agama
    "Ibadah & Ritual": ["sholat", "puasa", "haji", "umrah", "zakat", "ibadah", "doa", "misa", "kebaktian"],
    "Toleransi Beragama": ["toleransi", "umat", "kerukunan", "harmoni", "damai", "menghormati"],
    "Isu Keagamaan": ["agama", "islam", "kristen", "katolik", "hindu", "budha", "konghucu", "aliran", "keyakinan"],
    "Ustadz & Tokoh Agama": ["ustadz", "ustad", "kyai", "pendeta", "pastor", "biksu", "rohaniwan", "ulama"],

    # Pendidikan
    "Sekolah & Kurikulum": ["sekolah", "sd", "smp", "sma", "smk", "kurikulum", "pelajaran", "ujian", "nilai"],
    "Perguruan Tinggi": ["universitas", "kampus", "mahasiswa", "kuliah", "dosen", "skripsi", "wisuda", "jurusan"],
    "Guru & Tenaga Pendidik": ["guru", "pengajar", "pendidik", "mengajar", "pendidikan"],
    "Biaya Pendidikan": ["spp", "beasiswa", "gratis"],

    # Teknologi
    "Media Sosial": ["facebook", "instagram", "twitter", "tiktok", "whatsapp", "youtube", "medsos"],
    "E-Commerce & Fintech": ["tokopedia", "shopee", "lazada", "gojek", "grab", "ovo", "dana", "gopay", "ecommerce"],
    "Internet & Digital": ["internet", "wifi", "provider", "telkomsel", "indosat", "xl", "online", "digital"],
    "Gadget & Perangkat": ["hp", "handphone", "laptop", "komputer", "gadget", "smartphone", "android", "iphone"],

    # Kesehatan
    "Covid-19 & Pandemi": ["covid", "corona", "pandemi", "vaksin", "vaksinasi", "booster", "isolasi"],
    "Rumah Sakit & Pelayanan": ["rumah sakit", "rs", "dokter", "perawat", "puskesmas", "klinik", "pelayanan"],
    "Penyakit & Pengobatan": ["sakit", "penyakit", "obat", "pengobatan", "terapi", "operasi", "rawat", "inap"],
    "BPJS & Asuransi": ["bpjs", "asuransi", "jaminan", "kesehatan", "klaim", "premi"],

    # Infrastruktur & Transportasi
    "Jalan & Infrastruktur": ["jalan", "infrastruktur", "jembatan", "tol", "pembangunan", "konstruksi", "proyek"],
    "Transportasi Umum": ["busway", "transjakarta", "mrt", "lrt", "kereta", "commuter", "angkot", "ojek"],
    "Kemacetan & Lalu Lintas": ["macet", "kemacetan", "lalu", "lintas", "traffic", "kendaraan"],

    # Lingkungan
    "Banjir & Bencana": ["banjir", "bencana", "longsor", "gempa", "tsunami", "gunung", "meletus", "kebakaran"],
    "Polusi & Sampah": ["polusi", "limbah", "sampah", "pencemaran", "asap", "udara", "kotor"],
    "Lingkungan Hidup": ["lingkungan", "alam", "hutan", "reboisasi", "hijau", "climate", "iklim"],

    # Olahraga & Hiburan
    "Sepak Bola": ["sepak", "bola", "football", "timnas", "liga", "persija", "persib", "arema"],
    "Bulutangkis & Olahraga": ["bulutangkis", "badminton", "basket", "voli", "atletik", "renang", "olahraga"],
    "Film & Hiburan": ["film", "movie", "sinetron", "drama", "artis", "selebriti", "hiburan", "entertainment"],
}


# --- Entity targets ---

PRONOUNS = ["kita", "kami", "mereka", "dia", "beliau", "kalian", "anda"]
KNOWN_NAMES = ["jokowi", "prabowo", "megawati", "ahok", "anies", "ridwan kamil", "ganjar", "gibran"]
KNOWN_GROUPS = ["pemerintah", "dpr", "polisi", "tni", "ormas", "buzzer", "netizen"]
