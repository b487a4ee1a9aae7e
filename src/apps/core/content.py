"""Static copy for the landing page."""

PRACTICE_AREAS = [
    {
        "title": "Commercial & corporate law",
        "text": "Company formation, shareholder agreements, commercial contracts and day-to-day counsel for businesses.",
    },
    {
        "title": "Civil & family law",
        "text": "Property disputes, inheritance, divorce, custody and the civil matters that shape private life.",
    },
    {
        "title": "Litigation",
        "text": "Representation before courts and arbitral tribunals, from the first notice to the final appeal.",
    },
    {
        "title": "Labor law",
        "text": "Employment contracts, dismissals, workplace investigations and disputes with employers.",
    },
    {
        "title": "Criminal law",
        "text": "Defense and assistance at every stage of criminal proceedings, including urgent situations.",
    },
    {
        "title": "Legal retainer",
        "text": "Ongoing counsel for a fixed monthly fee, with priority answers to everyday legal questions.",
    },
]

TESTIMONIALS = [
    {
        "name": "Andrei M.",
        "role": "Entrepreneur, Cluj-Napoca",
        "text": "Clear advice from the first meeting and a contract dispute settled without going to court.",
    },
    {
        "name": "Elena P.",
        "role": "Client, Cluj-Napoca",
        "text": "They explained every step of the inheritance case and always answered the same day.",
    },
    {
        "name": "Mihai T.",
        "role": "Managing director, IT sector",
        "text": "The retainer gives us quick answers on contracts and employment questions.",
    },
    {
        "name": "Laura S.",
        "role": "Freelancer, Bucharest",
        "text": "Professional, transparent about fees and very easy to work with remotely.",
    },
]

FAQS = [
    {
        "q": "How much do your services cost?",
        "a": "Fees depend on the complexity of the case and the time required. We offer hourly rates, fixed fees "
        "for standard services and, in some cases, success fees. You receive a clear estimate during the free "
        "initial consultation.",
    },
    {
        "q": "Is the initial consultation really free?",
        "a": "Yes. The first 30 minutes are free and carry no obligation to continue working together.",
    },
    {
        "q": "How long does a court case take?",
        "a": "It depends on the case and on the court's workload. A first-instance civil case usually takes between "
        "12 and 18 months. We give realistic estimates during the analysis phase.",
    },
    {
        "q": "Do you work online?",
        "a": "Yes. We advise clients across the country and abroad by video call or phone. Documents can be sent "
        "electronically and signed electronically where the law allows it.",
    },
    {
        "q": "What documents should I prepare for the consultation?",
        "a": "None are required for the first discussion. If you have contracts, correspondence or decisions from "
        "authorities, you can send them beforehand for a more efficient review.",
    },
    {
        "q": "Do you guarantee winning the case?",
        "a": "No serious lawyer can guarantee the outcome of a trial. We guarantee professionalism, commitment and "
        "transparency.",
    },
    {
        "q": "How is payment handled?",
        "a": "One-off advice is invoiced after the service. Complex cases and retainers work with an advance and "
        "periodic invoicing. We accept bank transfer and card.",
    },
    {
        "q": "What if we are not satisfied with the collaboration?",
        "a": "Either party may terminate the legal assistance contract under its terms. We encourage an open "
        "discussion first to find a solution.",
    },
]
