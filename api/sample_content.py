"""
api/sample_content.py — seeded in-memory catalog (lost on restart)
"""

from driving_theory.models.content import GlossaryItem, Lesson, Question, Section, Sign
from driving_theory.services.content_repository import ContentRepository

SAMPLE_SECTIONS = [
    Section(id="sec1", name="إشارات المرور", icon="🚦", order=1),
    Section(id="sec2", name="قواعد الطريق", icon="🚗", order=2),
    Section(id="sec3", name="السلامة", icon="🛡️", order=3),
]

SAMPLE_LESSONS = [
    Lesson(id="1", title="الإشارات الضوئية", title_it="Semaforo", category="إشارات", section_id="sec1", order=1,
           content="الإشارة الضوئية تنظم حركة المرور عند التقاطعات.",
           example="عندما تكون الإشارة حمراء (Rosso) يجب أن تتوقف قبل خط التوقف."),
    Lesson(id="2", title="حدود السرعة", title_it="Limiti di velocità", category="قواعد", section_id="sec2", order=2,
           content="داخل المدن 50 كم/س، على الطرق خارج المدن 90 كم/س، وعلى الطرق السريعة 130 كم/س.",
           example="في وسط روما السرعة القصوى هي 50 كم/س."),
    Lesson(id="3", title="أولوية المرور", title_it="Precedenza", category="قواعد", section_id="sec2", order=3,
           content="في التقاطع بدون إشارات، الأولوية للسيارة القادمة من اليمين.",
           example="إذا جاءت سيارة من يمينك في تقاطع بدون إشارات، اتركها تمر."),
    Lesson(id="4", title="المسافة الآمنة", title_it="Distanza di sicurezza", category="سلامة", section_id="sec3", order=4,
           content="المسافة الآمنة تسمح لك بالتوقف دون الاصطدام بالسيارة التي أمامك.",
           example="على سرعة 50 كم/س تحتاج 25 متر على الأقل."),
    Lesson(id="5", title="التجاوز", title_it="Sorpasso", category="قواعد", section_id="sec2", order=5,
           content="التجاوز يكون من اليسار بعد التأكد من خلو الطريق.",
           example="قبل تجاوز شاحنة انظر في المرايا وأشعل الإشارة."),
    Lesson(id="6", title="الوقوف والتوقف", title_it="Sosta e Fermata", category="قواعد", section_id="sec2", order=6,
           content="التوقف (Fermata) قصير ومؤقت، والوقوف (Sosta) أطول.",
           example="الخط الأصفر على الرصيف يعني ممنوع الوقوف."),
    Lesson(id="7", title="حزام الأمان", title_it="Cintura di sicurezza", category="سلامة", section_id="sec3", order=7,
           content="حزام الأمان إلزامي لجميع الركاب في المقاعد الأمامية والخلفية.",
           example="السائق مسؤول عن ربط حزام الأطفال."),
    Lesson(id="8", title="الإشارات التحذيرية", title_it="Segnali di pericolo", category="إشارات", section_id="sec1", order=8,
           content="الإشارات التحذيرية مثلثة بحافة حمراء وتنبه إلى خطر قريب.",
           example="إشارة المنعطف الخطر تعني أن عليك تخفيف السرعة."),
]

SAMPLE_SIGNS = [
    Sign(id="s1", name="قف", name_it="Fermarsi e dare precedenza", category="prohibition", image_emoji="🛑",
         description="يجب التوقف تماماً وإعطاء الأولوية.", real_example="عند تقاطع مع طريق رئيسي."),
    Sign(id="s2", name="أعط الأولوية", name_it="Dare precedenza", category="warning", image_emoji="🔻",
         description="أعط الأولوية للسيارات على الطريق الآخر.", real_example="قبل الدخول إلى دوار."),
    Sign(id="s3", name="ممنوع الدخول", name_it="Senso vietato", category="prohibition", image_emoji="⛔",
         description="ممنوع الدخول لجميع المركبات.", real_example="في بداية شارع باتجاه واحد."),
    Sign(id="s4", name="منعطف خطر", name_it="Curva pericolosa", category="warning", image_emoji="↪️",
         description="منعطف خطر قريب.", real_example="على طرق الجبال."),
    Sign(id="s5", name="دوار", name_it="Rotatoria", category="obligation", image_emoji="🔄",
         description="إلزام بالسير حول الدوار.", real_example="عند مداخل المدن."),
    Sign(id="s6", name="ممر مشاة", name_it="Attraversamento pedonale", category="information", image_emoji="🚶",
         description="يشير إلى ممر مشاة.", real_example="قرب المدارس."),
    Sign(id="s7", name="حد السرعة 50", name_it="Limite massimo di velocità 50", category="prohibition", image_emoji="5️⃣0️⃣",
         description="لا تتجاوز 50 كم/س.", real_example="داخل المدن."),
    Sign(id="s8", name="موقف سيارات", name_it="Parcheggio", category="information", image_emoji="🅿️",
         description="مكان مخصص للوقوف.", real_example="قرب المراكز التجارية."),
]


def _q(id, text_it, text_ar, answer, explanation, category, difficulty="medium", lesson_id=None, sign_id=None):
    return Question(
        id=id, text_it=text_it, text_ar=text_ar, answer=answer, explanation=explanation,
        category=category, difficulty=difficulty, lesson_id=lesson_id, sign_id=sign_id,
    )


SAMPLE_QUESTIONS = [
    _q("q1", "Con il semaforo rosso bisogna fermarsi prima della linea di arresto.",
       "عند الإشارة الحمراء يجب التوقف قبل خط التوقف.", True,
       "الضوء الأحمر يعني التوقف الكامل.", "segnali", "easy", lesson_id="1"),
    _q("q2", "Con il semaforo giallo si può sempre accelerare per passare.",
       "عند الإشارة الصفراء يمكن دائماً التسريع للمرور.", False,
       "الأصفر يعني الاستعداد للتوقف إلا إذا كان التوقف خطيراً.", "segnali", "easy", lesson_id="1"),
    _q("q3", "Il semaforo verde consente di procedere se l'incrocio è libero.",
       "الإشارة الخضراء تسمح بالمرور إذا كان التقاطع فارغاً.", True,
       "الأخضر يسمح بالمرور بشرط ألا يكون التقاطع مزدحماً.", "segnali", "easy", lesson_id="1"),
    _q("q4", "Nei centri abitati il limite massimo di velocità è 50 km/h.",
       "داخل المدن الحد الأقصى للسرعة 50 كم/س.", True,
       "هذا هو الحد العام داخل المناطق السكنية.", "velocità", "easy", lesson_id="2"),
    _q("q5", "In autostrada il limite massimo è 150 km/h.",
       "على الطريق السريع الحد الأقصى 150 كم/س.", False,
       "الحد على الطريق السريع هو 130 كم/س.", "velocità", "medium", lesson_id="2"),
    _q("q6", "Con la pioggia il limite in autostrada si riduce a 110 km/h.",
       "عند المطر ينخفض الحد على الطريق السريع إلى 110 كم/س.", True,
       "في حالة الأمطار يصبح الحد 110 كم/س.", "velocità", "hard", lesson_id="2"),
    _q("q7", "In un incrocio senza segnali si dà la precedenza ai veicoli da destra.",
       "في تقاطع بدون إشارات تعطى الأولوية للسيارات القادمة من اليمين.", True,
       "قاعدة اليمين تطبق عند غياب الإشارات.", "precedenza", "medium", lesson_id="3"),
    _q("q8", "Il segnale di STOP obbliga solo a rallentare.",
       "إشارة قف تلزم فقط بتخفيف السرعة.", False,
       "إشارة قف تلزم بالتوقف الكامل.", "precedenza", "easy", lesson_id="3", sign_id="s1"),
    _q("q9", "Il segnale DARE PRECEDENZA obbliga a fermarsi sempre.",
       "إشارة أعط الأولوية تلزم بالتوقف دائماً.", False,
       "تلزم بإعطاء الأولوية والتوقف فقط عند الضرورة.", "precedenza", "medium", lesson_id="3", sign_id="s2"),
    _q("q10", "La distanza di sicurezza aumenta con la velocità.",
        "المسافة الآمنة تزداد مع زيادة السرعة.", True,
        "كلما زادت السرعة زادت مسافة التوقف.", "sicurezza", "easy", lesson_id="4"),
    _q("q11", "Con il fondo bagnato la distanza di sicurezza può diminuire.",
        "على الطريق المبلل يمكن أن تقل المسافة الآمنة.", False,
        "الطريق المبلل يزيد مسافة التوقف.", "sicurezza", "medium", lesson_id="4"),
    _q("q12", "Il sorpasso si effettua normalmente a sinistra.",
        "التجاوز يكون عادة من اليسار.", True,
        "في إيطاليا يكون التجاوز من اليسار.", "sorpasso", "easy", lesson_id="5"),
    _q("q13", "È consentito sorpassare in prossimità di una curva senza visibilità.",
        "يسمح بالتجاوز قرب منعطف بدون رؤية.", False,
        "التجاوز ممنوع عند المنعطفات بدون رؤية كافية.", "sorpasso", "medium", lesson_id="5"),
    _q("q14", "Prima di sorpassare bisogna azionare l'indicatore di direzione.",
        "قبل التجاوز يجب تشغيل إشارة الاتجاه.", True,
        "الإشارة تنبه السائقين الآخرين.", "sorpasso", "easy", lesson_id="5"),
    _q("q15", "La fermata è una sospensione breve della marcia.",
        "التوقف هو إيقاف قصير للسير.", True,
        "Fermata تعني توقفاً قصيراً مع بقاء السائق.", "sosta", "medium", lesson_id="6"),
    _q("q16", "È consentita la sosta sul marciapiede.",
        "يسمح بالوقوف على الرصيف.", False,
        "الوقوف على الرصيف ممنوع.", "sosta", "easy", lesson_id="6"),
    _q("q17", "La striscia gialla sul bordo indica divieto di sosta.",
        "الخط الأصفر على الحافة يعني ممنوع الوقوف.", True,
        "الخط الأصفر مخصص لاستعمالات خاصة.", "sosta", "medium", lesson_id="6"),
    _q("q18", "La cintura di sicurezza è obbligatoria anche sui sedili posteriori.",
        "حزام الأمان إلزامي أيضاً في المقاعد الخلفية.", True,
        "جميع الركاب يجب أن يربطوا الحزام.", "sicurezza", "easy", lesson_id="7"),
    _q("q19", "Il conducente non è responsabile delle cinture dei minori.",
        "السائق غير مسؤول عن أحزمة القاصرين.", False,
        "السائق مسؤول عن ربط حزام الأطفال.", "sicurezza", "medium", lesson_id="7"),
    _q("q20", "I segnali di pericolo hanno forma triangolare.",
        "إشارات الخطر لها شكل مثلث.", True,
        "إشارات التحذير مثلثة بحافة حمراء.", "segnali", "easy", lesson_id="8", sign_id="s4"),
    _q("q21", "Il segnale CURVA PERICOLOSA impone di aumentare la velocità.",
        "إشارة المنعطف الخطر تفرض زيادة السرعة.", False,
        "يجب تخفيف السرعة قبل المنعطف.", "segnali", "easy", lesson_id="8", sign_id="s4"),
    _q("q22", "Il segnale SENSO VIETATO vieta l'ingresso a tutti i veicoli.",
        "إشارة ممنوع الدخول تمنع دخول جميع المركبات.", True,
        "لا يجوز الدخول من هذا الاتجاه.", "segnali", "medium", sign_id="s3"),
    _q("q23", "Nella rotatoria si circola in senso orario.",
        "في الدوار يكون السير باتجاه عقارب الساعة.", False,
        "في إيطاليا السير في الدوار عكس عقارب الساعة.", "precedenza", "hard", sign_id="s5"),
    _q("q24", "In prossimità degli attraversamenti pedonali bisogna moderare la velocità.",
        "قرب ممرات المشاة يجب تخفيف السرعة.", True,
        "المشاة لهم الأولوية على الممر.", "sicurezza", "easy", sign_id="s6"),
]

SAMPLE_GLOSSARY = [
    GlossaryItem(id="g1", term_it="Semaforo", term_ar="إشارة ضوئية", example="Il semaforo è rosso.", category="segnali"),
    GlossaryItem(id="g2", term_it="Precedenza", term_ar="أولوية", example="Dare precedenza a destra.", category="regole"),
    GlossaryItem(id="g3", term_it="Sorpasso", term_ar="تجاوز", example="Il sorpasso è vietato.", category="regole"),
    GlossaryItem(id="g4", term_it="Sosta", term_ar="وقوف", example="Divieto di sosta.", category="regole"),
    GlossaryItem(id="g5", term_it="Incrocio", term_ar="تقاطع", example="Rallentare all'incrocio.", category="strada"),
    GlossaryItem(id="g6", term_it="Marciapiede", term_ar="رصيف", example="Non sostare sul marciapiede.", category="strada"),
]


def load_sample_content() -> ContentRepository:
    return ContentRepository(
        lessons=SAMPLE_LESSONS,
        signs=SAMPLE_SIGNS,
        questions=SAMPLE_QUESTIONS,
        sections=SAMPLE_SECTIONS,
        glossary=SAMPLE_GLOSSARY,
    )
