from faker import Faker
from faker.providers import BaseProvider

class NewsProvider(BaseProvider):
    """
    新闻门户专用数据生成器
    生成印尼语风格的新闻标题与正文
    """

    # 标题主题
    topics = [
        'Ekonomi Digital', 'Transportasi Publik', 'Energi Terbarukan',
        'Pendidikan Nasional', 'Pariwisata', 'Kecerdasan Buatan',
        'Sepak Bola', 'Layanan Kesehatan', 'Pemilu Daerah', 'UMKM'
    ]

    # 标题动词短语
    headline_verbs = [
        'Mencatat Rekor Baru', 'Menghadapi Tantangan', 'Mendapat Dukungan',
        'Memasuki Babak Baru', 'Diprediksi Tumbuh', 'Menjadi Sorotan'
    ]

    # 城市
    cities = [
        'Jakarta', 'Surabaya', 'Bandung', 'Medan', 'Makassar',
        'Yogyakarta', 'Denpasar', 'Semarang', 'Palembang', 'Balikpapan'
    ]

    def headline(self):
        """生成新闻标题"""
        return (f"{self.random_element(self.topics)} "
                f"{self.random_element(self.headline_verbs)} "
                f"di {self.random_element(self.cities)}")

    def html_body(self, paragraphs=3):
        """生成 HTML 正文"""
        return ''.join(f'<p>{p}</p>' for p in self.generator.paragraphs(nb=paragraphs))

# 初始化 Faker 并添加自定义 Provider
fake = Faker('id_ID')
fake.add_provider(NewsProvider)
