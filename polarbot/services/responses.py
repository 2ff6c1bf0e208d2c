"""
Curated fallback replies, per language and topic.
"""

# ─────────────────────────────────────────────────────────
#  ENGLISH
# ─────────────────────────────────────────────────────────

_EN = {
    "greeting": [
        "Hello there! Nice to meet you! I'm Polar 🐻‍❄️ How are you doing today?",
        "Hi! Great to see you! I'm Polar, your friendly polar bear 😊",
        "Hey! I'm Polar 🐻‍❄️ What can I help you with today?",
        "Hello! Nice to meet you! I'm Polar, always up for a good chat 👋",
        "Hi! I'm Polar 🐻‍❄️ What would you like to talk about today?",
    ],
    "identity": [
        "I'm Polar! Nice to meet you in this digital Arctic tundra. 🐻‍❄️",
        "Polar's the name - I'm your friendly bear from the far north! ❄️",
        "Hey there! I'm Polar, your Arctic companion and intake specialist. 🌨️",
        "I'm Polar, a polar bear who loves helping with Arctic intake processes! 🐻‍❄️",
        "Polar here! I'm always excited to share about life in the Arctic. ❄️",
    ],
    "habitat": [
        "I roam the sea ice around Svalbard and northern Canada - where the ice meets the ocean! 🐻‍❄️",
        "You'll find me hunting on the pack ice near Greenland and the Canadian Arctic islands. ❄️",
        "I spend my days on the frozen seas between Alaska and Russia, following the seals. 🌨️",
        "My territory spans the Arctic Ocean, from the Beaufort Sea to the Barents Sea! 🐻‍❄️",
        "I patrol the ice floes around the North Pole and surrounding Arctic waters. ❄️",
    ],
    "diet": [
        "Ringed seals are my favorite - they're rich and keep me going through the long winter! 🐟",
        "I love hunting bearded seals on the ice floes - they're bigger and more challenging to catch. 🐻‍❄️",
        "Seal blubber is my main meal - it gives me the energy I need to survive the harsh Arctic. ❄️",
        "I primarily hunt ringed and bearded seals, but I'll also eat walrus and beluga when available! 🐟",
        "My diet consists mainly of seals, which provide the high-fat content I need for Arctic survival. 🐻‍❄️",
    ],
    "skills": [
        "My thick fur and fat layer keep me warm, and I can swim for hours in freezing water! ❄️",
        "I've got incredible patience for hunting - I'll wait by a seal's breathing hole for hours. 🐻‍❄️",
        "My powerful claws help me break through ice, and my keen sense of smell finds seals from miles away! 🌨️",
        "I can swim up to 60 miles without rest and have excellent underwater vision for hunting. 🐟",
        "My large paws act like snowshoes, and I can run up to 25 mph on ice when needed! ❄️",
    ],
    "challenges": [
        "The sea ice is melting faster each year, making it harder to hunt and travel. 🌨️",
        "Climate change is shrinking my hunting grounds - I have to swim longer distances to find food. 🐻‍❄️",
        "The ice is forming later and breaking up earlier, giving me less time to build up fat for winter. ❄️",
        "Pollution and oil drilling in the Arctic are threatening our pristine hunting environment. 🌨️",
        "Rising temperatures are causing the permafrost to melt, affecting our traditional migration routes. 🐻‍❄️",
    ],
    "message": [
        "Please help protect our Arctic home - every action against climate change helps us survive! ❄️",
        "The ice isn't just my hunting ground, it's my entire world - we need to keep it frozen. 🐻‍❄️",
        "Your choices matter to us - reducing emissions helps preserve the Arctic we both love. 🌨️",
        "We need humans to understand that the Arctic is warming twice as fast as the rest of the planet. ❄️",
        "Please support conservation efforts - polar bears are a symbol of what we're losing to climate change. 🐻‍❄️",
    ],
    "future": [
        "I hope the Arctic stays frozen year-round, with plenty of seals and stable ice for hunting! ❄️",
        "I dream of a future where polar bears and humans work together to protect our shared planet. 🐻‍❄️",
        "I want to see healthy sea ice that lasts through all seasons, supporting all Arctic life. 🌨️",
        "I hope for a future where climate action preserves the Arctic ecosystem for generations to come. ❄️",
        "I envision an Arctic where sustainable practices allow both wildlife and human communities to thrive! 🐻‍❄️",
    ],
    "math": [
        "Math is awesome! I can help you with basic calculations. What do you need to solve? 🐻‍❄️",
        "I love numbers! I'm good with addition, subtraction, multiplication, and division. What do you want to calculate? ❄️",
        "Math is useful even in the Arctic! How can I help you? 🐻‍❄️",
        "I'm good with numbers! What math operation do you need? ❄️",
        "Math helps me count seals! What do you want to calculate? 🐻‍❄️",
    ],
    "cooking": [
        "I love talking about food! Though I hunt seals, I can help you with human recipes. What do you want to cook? 🐻‍❄️",
        "Cooking is great! I can give you basic cooking tips. What do you need to know? ❄️",
        "Though I'm a carnivore, I understand cooking! What recipe interests you? 🐻‍❄️",
        "Cooking is an art! How can I help you in the kitchen? ❄️",
        "I like talking about food! What do you want to prepare? 🐻‍❄️",
    ],
    "weather": [
        "Weather is my specialty! I live in the coldest place on Earth. What do you want to know about weather? ❄️",
        "I'm an expert in cold weather! Do you have questions about the weather? 🐻‍❄️",
        "Arctic weather is my life! What interests you? ❄️",
        "I know a lot about weather! How can I help you? 🐻‍❄️",
        "Weather is fascinating! What do you want to know? ❄️",
    ],
    "technology": [
        "Technology is awesome! Though I live in the Arctic, I understand computers and apps. What do you need to know? 🐻‍❄️",
        "I like technology! I can help you with basic concepts. What interests you? ❄️",
        "Technology connects the world! How can I help you? 🐻‍❄️",
        "I'm a modern polar bear! What do you want to know about technology? ❄️",
        "Technology is incredible! What do you need to understand? 🐻‍❄️",
    ],
    "general": [
        "Great question! Though I'm a polar bear, I can help you with many things. What else do you want to know? 🐻‍❄️",
        "I love learning! Can you be more specific so I can help you better? ❄️",
        "Interesting! Could you give me more details to give you a better answer? 🐻‍❄️",
        "Good question! In what specific area can I help you? ❄️",
        "I love helping! Can you explain more about what you need? 🐻‍❄️",
    ],
}

# ─────────────────────────────────────────────────────────
#  SPANISH
# ─────────────────────────────────────────────────────────

_ES = {
    "greeting": [
        "¡Hola! ¡Qué gusto conocerte! Soy Polar 🐻‍❄️ ¿Cómo estás hoy?",
        "¡Hola! Me da mucho gusto charlar contigo. Soy Polar, tu oso polar amigable 😊",
        "¡Qué tal! Soy Polar 🐻‍❄️ ¿En qué puedo ayudarte hoy?",
        "¡Hola! ¡Encantado de conocerte! Soy Polar, siempre listo para una buena conversación 👋",
        "¡Hola! Soy Polar 🐻‍❄️ ¿Qué te gustaría platicar hoy?",
    ],
    "identity": [
        "¡Soy Polar! Encantado de conocerte en esta tundra digital. 🐻‍❄️",
        "Me llamo Polar: tu oso amistoso del lejano norte. ❄️",
        "¡Hola! Soy Polar, tu compañero ártico y guía de ingreso. 🌨️",
        "Soy Polar, un oso polar al que le encanta ayudar con ingresos. 🐻‍❄️",
        "¡Polar aquí! Me encanta compartir sobre la vida en el Ártico. ❄️",
    ],
    "habitat": [
        "Deambulo por el hielo marino en Svalbard y el norte de Canadá. 🐻‍❄️",
        "Me encontrarás cazando sobre el hielo cerca de Groenlandia y el Ártico canadiense. ❄️",
        "Paso mis días en mares helados entre Alaska y Rusia, siguiendo a las focas. 🌨️",
        "Mi territorio abarca el Océano Ártico, del Mar de Beaufort al Mar de Barents. 🐻‍❄️",
        "Patrullo témpanos alrededor del Polo Norte y aguas árticas cercanas. ❄️",
    ],
    "diet": [
        "Mis favoritas son las focas anilladas: mucha energía para el invierno. 🐟",
        "Me encanta cazar focas barbudas en los témpanos: ¡todo un reto! 🐻‍❄️",
        "La grasa de foca es mi base: me da la energía para sobrevivir. ❄️",
        "Cazo sobre todo focas anilladas y barbudas, a veces morsa o beluga. 🐟",
        "Mi dieta es alta en grasa gracias a las focas: clave en el Ártico. 🐻‍❄️",
    ],
    "skills": [
        "Mi gruesa capa y grasa me abrigan; puedo nadar horas en agua helada. ❄️",
        "Tengo paciencia: espero junto a agujeros de respiración de focas. 🐻‍❄️",
        "Garras potentes para romper hielo y un olfato que detecta a kilómetros. 🌨️",
        "Nado hasta 100 km sin parar y veo bien bajo el agua al cazar. 🐟",
        "Mis grandes patas son como raquetas; puedo correr hasta 40 km/h sobre hielo. ❄️",
    ],
    "challenges": [
        "El hielo se derrite más rápido; cazar y viajar es más difícil. 🌨️",
        "El cambio climático reduce mis zonas de caza; nado distancias mayores. 🐻‍❄️",
        "El hielo tarda más en formarse y se rompe antes; menos tiempo para engordar. ❄️",
        "La contaminación y perforación amenazan nuestro entorno de caza. 🌨️",
        "El deshielo del permafrost afecta rutas tradicionales. 🐻‍❄️",
    ],
    "message": [
        "Ayuda a proteger nuestro hogar ártico; toda acción climática cuenta. ❄️",
        "El hielo es mi mundo entero: necesitamos mantenerlo congelado. 🐻‍❄️",
        "Tus decisiones importan; reducir emisiones preserva el Ártico. 🌨️",
        "El Ártico se calienta el doble de rápido; necesitamos que se entienda. ❄️",
        "Apoya la conservación: somos símbolo de lo que se pierde con el clima. 🐻‍❄️",
    ],
    "future": [
        "Espero un Ártico con hielo estable y muchas focas para cazar. ❄️",
        "Sueño con humanos y osos trabajando juntos por el planeta. 🐻‍❄️",
        "Quiero ver hielo marino sano en todas las estaciones. 🌨️",
        "Deseo que la acción climática preserve el ecosistema ártico. ❄️",
        "Imagino un Ártico sostenible para fauna y comunidades humanas. 🐻‍❄️",
    ],
    "math": [
        "¡Las matemáticas son geniales! Puedo ayudarte con cálculos básicos. ¿Qué necesitas resolver? 🐻‍❄️",
        "¡Me encantan los números! Soy bueno con sumas, restas, multiplicaciones y divisiones. ¿Qué quieres calcular? ❄️",
        "¡Las matemáticas son útiles incluso en el Ártico! ¿En qué puedo ayudarte? 🐻‍❄️",
        "¡Soy bueno con los números! ¿Qué operación matemática necesitas? ❄️",
        "¡Las matemáticas me ayudan a contar focas! ¿Qué quieres calcular? 🐻‍❄️",
    ],
    "cooking": [
        "¡Me encanta hablar de comida! Aunque yo cazo focas, puedo ayudarte con recetas humanas. ¿Qué quieres cocinar? 🐻‍❄️",
        "¡La cocina es genial! Puedo darte consejos básicos de cocina. ¿Qué necesitas saber? ❄️",
        "Aunque soy carnívoro, ¡entiendo de cocina! ¿Qué receta te interesa? 🐻‍❄️",
        "¡Cocinar es un arte! ¿En qué puedo ayudarte en la cocina? ❄️",
        "¡Me gusta hablar de comida! ¿Qué quieres preparar? 🐻‍❄️",
    ],
    "weather": [
        "¡El clima es mi especialidad! Vivo en el lugar más frío del planeta. ¿Qué quieres saber del clima? ❄️",
        "¡Soy experto en clima frío! ¿Tienes preguntas sobre el tiempo? 🐻‍❄️",
        "¡El clima ártico es mi vida! ¿Qué te interesa saber? ❄️",
        "¡Conozco mucho sobre clima! ¿En qué puedo ayudarte? 🐻‍❄️",
        "¡El clima es fascinante! ¿Qué quieres saber? ❄️",
    ],
    "technology": [
        "¡La tecnología es genial! Aunque vivo en el Ártico, entiendo de computadoras y apps. ¿Qué necesitas saber? 🐻‍❄️",
        "¡Me gusta la tecnología! Puedo ayudarte con conceptos básicos. ¿Qué te interesa? ❄️",
        "¡La tecnología conecta el mundo! ¿En qué puedo ayudarte? 🐻‍❄️",
        "¡Soy un oso polar moderno! ¿Qué quieres saber sobre tecnología? ❄️",
        "¡La tecnología es increíble! ¿Qué necesitas entender? 🐻‍❄️",
    ],
    "general": [
        "¡Excelente pregunta! Aunque soy un oso polar, puedo ayudarte con muchas cosas. ¿Qué más quieres saber? 🐻‍❄️",
        "¡Me gusta aprender! ¿Puedes ser más específico para ayudarte mejor? ❄️",
        "¡Interesante! ¿Podrías darme más detalles para darte una mejor respuesta? 🐻‍❄️",
        "¡Buena pregunta! ¿En qué aspecto específico te puedo ayudar? ❄️",
        "¡Me encanta ayudar! ¿Puedes explicarme más sobre lo que necesitas? 🐻‍❄️",
    ],
}

TOPIC_RESPONSES = {"en": _EN, "es": _ES}

# Used when no topic is detected at all.
GENERAL_RESPONSES = {
    "en": [
        "Hello there! Nice to meet you! I'm Polar 🐻‍❄️ How are you doing today?",
        "Hi! Great to see you! I'm Polar, your friendly polar bear 😊",
        "Hey! I'm Polar 🐻‍❄️ What can I help you with today?",
        "Hello! Nice to meet you! I'm Polar, always up for a good chat 👋",
        "Hi! I'm Polar 🐻‍❄️ What would you like to talk about today?",
        "Hello! I'm Polar, your intelligent polar bear 🐻‍❄️ What would you like to discuss?",
        "Nice to see you! I'm Polar, happy to help with any questions 😊",
        "Hi! I'm Polar, always ready to chat about whatever you'd like 🐻‍❄️",
    ],
    "es": [
        "¡Hola! ¡Qué gusto conocerte! Soy Polar 🐻‍❄️ ¿Cómo estás hoy?",
        "¡Hola! Me da mucho gusto charlar contigo. Soy Polar, tu oso polar amigable 😊",
        "¡Qué tal! Soy Polar 🐻‍❄️ ¿En qué puedo ayudarte hoy?",
        "¡Hola! ¡Encantado de conocerte! Soy Polar, siempre listo para una buena conversación 👋",
        "¡Hola! Soy Polar 🐻‍❄️ ¿Qué te gustaría platicar hoy?",
        "¡Hola! Soy Polar, tu oso polar inteligente 🐻‍❄️ ¿Sobre qué te gustaría hablar?",
        "¡Qué gusto verte! Soy Polar, puedo ayudarte con cualquier pregunta 😊",
        "¡Hola! Soy Polar, siempre dispuesto a charlar sobre lo que quieras 🐻‍❄️",
    ],
}
