"""
Defines the extension to MIME type table used by the mimeguess library.

Each entry pairs a lowercase extension (no leading dot) with one or more MIME
types. The first type of an entry is its primary type. Entries are kept in
ordinal order with no repeated extensions so lookups can bisect the table;
`mimeguess.validation.validate_table` checks this.
"""

OCTET_STREAM = "application/octet-stream"
TEXT_PLAIN = "text/plain"

MIME_TYPES = (
    ("123", ("application/vnd.lotus-1-2-3",)),
    ("1km", ("application/vnd.1000minds.decision-model+xml",)),
    ("3dml", ("text/vnd.in3d.3dml",)),
    ("3ds", ("image/x-3ds",)),
    ("3g2", ("video/3gpp2",)),
    ("3gp", ("video/3gpp", "audio/3gpp")),
    ("3gpp", ("video/3gpp",)),
    ("3mf", ("model/3mf",)),
    ("7z", ("application/x-7z-compressed",)),
    ("aab", ("application/x-authorware-bin",)),
    ("aac", ("audio/aac", "audio/x-aac")),
    ("aam", ("application/x-authorware-map",)),
    ("aas", ("application/x-authorware-seg",)),
    ("abw", ("application/x-abiword",)),
    ("ac", ("application/pkix-attr-cert",)),
    ("acc", ("application/vnd.americandynamics.acc",)),
    ("ace", ("application/x-ace-compressed",)),
    ("acu", ("application/vnd.acucobol",)),
    ("adp", ("audio/adpcm",)),
    ("adts", ("audio/aac",)),
    ("aep", ("application/vnd.audiograph",)),
    ("afm", ("application/x-font-type1",)),
    ("ai", ("application/postscript",)),
    ("aif", ("audio/x-aiff",)),
    ("aifc", ("audio/x-aiff",)),
    ("aiff", ("audio/x-aiff",)),
    ("air", ("application/vnd.adobe.air-application-installer-package+zip",)),
    ("apk", ("application/vnd.android.package-archive",)),
    ("apng", ("image/apng",)),
    ("appcache", ("text/cache-manifest",)),
    ("application", ("application/x-ms-application",)),
    ("arc", ("application/x-freearc",)),
    ("arj", ("application/x-arj",)),
    ("asc", ("application/pgp-signature",)),
    ("asf", ("video/x-ms-asf",)),
    ("asm", ("text/x-asm",)),
    ("asx", ("video/x-ms-asf",)),
    ("atom", ("application/atom+xml",)),
    ("au", ("audio/basic",)),
    ("avi", ("video/x-msvideo", "video/avi", "video/msvideo")),
    ("avif", ("image/avif",)),
    ("azw", ("application/vnd.amazon.ebook",)),
    ("bat", ("application/x-msdownload",)),
    ("bcpio", ("application/x-bcpio",)),
    ("bdf", ("application/x-font-bdf",)),
    ("bin", ("application/octet-stream",)),
    ("blb", ("application/x-blorb",)),
    ("bmp", ("image/bmp", "image/x-ms-bmp")),
    ("book", ("application/vnd.framemaker",)),
    ("bz", ("application/x-bzip",)),
    ("bz2", ("application/x-bzip2",)),
    ("c", ("text/x-c",)),
    ("cab", ("application/vnd.ms-cab-compressed",)),
    ("cbr", ("application/x-cbr",)),
    ("cbz", ("application/x-cbr",)),
    ("cc", ("text/x-c",)),
    ("cda", ("application/x-cdf",)),
    ("cdf", ("application/x-netcdf",)),
    ("cer", ("application/pkix-cert",)),
    ("cgm", ("image/cgm",)),
    ("chm", ("application/vnd.ms-htmlhelp",)),
    ("cjs", ("application/node",)),
    ("class", ("application/java-vm",)),
    ("coffee", ("text/coffeescript",)),
    ("conf", ("text/plain",)),
    ("cpio", ("application/x-cpio",)),
    ("cpp", ("text/x-c",)),
    ("crl", ("application/pkix-crl",)),
    ("crt", ("application/x-x509-ca-cert",)),
    ("csh", ("application/x-csh",)),
    ("css", ("text/css",)),
    ("csv", ("text/csv",)),
    ("cu", ("application/cu-seeme",)),
    ("cxx", ("text/x-c",)),
    ("dart", ("application/vnd.dart",)),
    ("dcr", ("application/x-director",)),
    ("deb", ("application/x-debian-package", "application/vnd.debian.binary-package")),
    ("def", ("text/plain",)),
    ("der", ("application/x-x509-ca-cert",)),
    ("dib", ("image/bmp",)),
    ("dir", ("application/x-director",)),
    ("dll", ("application/x-msdownload", "application/octet-stream")),
    ("dmg", ("application/x-apple-diskimage",)),
    ("dms", ("application/octet-stream",)),
    ("doc", ("application/msword",)),
    ("docm", ("application/vnd.ms-word.document.macroenabled.12",)),
    ("docx", ("application/vnd.openxmlformats-officedocument.wordprocessingml.document",)),
    ("dot", ("application/msword",)),
    ("dotx", ("application/vnd.openxmlformats-officedocument.wordprocessingml.template",)),
    ("dtd", ("application/xml-dtd",)),
    ("dvi", ("application/x-dvi",)),
    ("dwg", ("image/vnd.dwg",)),
    ("dxf", ("image/vnd.dxf",)),
    ("ear", ("application/java-archive",)),
    ("eml", ("message/rfc822",)),
    ("eot", ("application/vnd.ms-fontobject",)),
    ("eps", ("application/postscript",)),
    ("epub", ("application/epub+zip",)),
    ("es", ("application/ecmascript",)),
    ("exe", ("application/x-msdownload", "application/octet-stream", "application/x-msdos-program")),
    ("f", ("text/x-fortran",)),
    ("f4v", ("video/x-f4v",)),
    ("f77", ("text/x-fortran",)),
    ("f90", ("text/x-fortran",)),
    ("fig", ("application/x-xfig",)),
    ("flac", ("audio/x-flac", "audio/flac")),
    ("fli", ("video/x-fli",)),
    ("flv", ("video/x-flv",)),
    ("for", ("text/x-fortran",)),
    ("gif", ("image/gif",)),
    ("gpx", ("application/gpx+xml",)),
    ("gv", ("text/vnd.graphviz",)),
    ("gz", ("application/gzip", "application/x-gzip")),
    ("h", ("text/x-c",)),
    ("heic", ("image/heic",)),
    ("heif", ("image/heif",)),
    ("hh", ("text/x-c",)),
    ("hqx", ("application/mac-binhex40",)),
    ("htc", ("text/x-component",)),
    ("htm", ("text/html",)),
    ("html", ("text/html",)),
    ("ico", ("image/x-icon", "image/vnd.microsoft.icon")),
    ("ics", ("text/calendar",)),
    ("ifb", ("text/calendar",)),
    ("img", ("application/octet-stream",)),
    ("ini", ("text/plain",)),
    ("iso", ("application/octet-stream", "application/x-iso9660-image")),
    ("jad", ("text/vnd.sun.j2me.app-descriptor",)),
    ("jar", ("application/java-archive",)),
    ("java", ("text/x-java-source",)),
    ("jfif", ("image/jpeg", "image/pjpeg")),
    ("jng", ("image/x-jng",)),
    ("jnlp", ("application/x-java-jnlp-file",)),
    ("jp2", ("image/jp2", "image/jpx")),
    ("jpe", ("image/jpeg",)),
    ("jpeg", ("image/jpeg", "image/pjpeg")),
    ("jpg", ("image/jpeg", "image/pjpeg")),
    ("js", ("application/javascript", "text/javascript")),
    ("json", ("application/json",)),
    ("json5", ("application/json5",)),
    ("jsonld", ("application/ld+json",)),
    ("jsx", ("text/jsx",)),
    ("jxl", ("image/jxl",)),
    ("kar", ("audio/midi",)),
    ("key", ("application/x-iwork-keynote-sffkey",)),
    ("kml", ("application/vnd.google-earth.kml+xml",)),
    ("kmz", ("application/vnd.google-earth.kmz",)),
    ("latex", ("application/x-latex",)),
    ("less", ("text/less",)),
    ("list", ("text/plain",)),
    ("log", ("text/plain",)),
    ("lua", ("text/x-lua",)),
    ("lzh", ("application/octet-stream",)),
    ("m1v", ("video/mpeg",)),
    ("m2a", ("audio/mpeg",)),
    ("m2v", ("video/mpeg",)),
    ("m3a", ("audio/mpeg",)),
    ("m3u", ("audio/x-mpegurl",)),
    ("m3u8", ("application/vnd.apple.mpegurl",)),
    ("m4a", ("audio/mp4", "audio/x-m4a")),
    ("m4v", ("video/x-m4v", "video/mp4")),
    ("man", ("text/troff",)),
    ("manifest", ("text/cache-manifest",)),
    ("markdown", ("text/markdown", "text/x-markdown")),
    ("md", ("text/markdown", "text/x-markdown")),
    ("mdb", ("application/x-msaccess",)),
    ("me", ("text/troff",)),
    ("mid", ("audio/midi", "audio/x-midi")),
    ("midi", ("audio/midi", "audio/x-midi")),
    ("mjs", ("application/javascript", "text/javascript")),
    ("mkv", ("video/x-matroska",)),
    ("mml", ("text/mathml",)),
    ("mobi", ("application/x-mobipocket-ebook",)),
    ("mov", ("video/quicktime",)),
    ("mp2", ("audio/mpeg",)),
    ("mp2a", ("audio/mpeg",)),
    ("mp3", ("audio/mpeg", "audio/mp3")),
    ("mp4", ("video/mp4", "application/mp4")),
    ("mp4a", ("audio/mp4",)),
    ("mp4s", ("application/mp4",)),
    ("mp4v", ("video/mp4",)),
    ("mpe", ("video/mpeg",)),
    ("mpeg", ("video/mpeg",)),
    ("mpg", ("video/mpeg",)),
    ("mpga", ("audio/mpeg",)),
    ("mpkg", ("application/vnd.apple.installer+xml",)),
    ("msg", ("application/vnd.ms-outlook",)),
    ("msi", ("application/x-msdownload", "application/x-ms-installer")),
    ("mts", ("model/vnd.mts", "video/mp2t")),
    ("numbers", ("application/x-iwork-numbers-sffnumbers",)),
    ("oda", ("application/oda",)),
    ("odb", ("application/vnd.oasis.opendocument.database",)),
    ("odc", ("application/vnd.oasis.opendocument.chart",)),
    ("odf", ("application/vnd.oasis.opendocument.formula",)),
    ("odg", ("application/vnd.oasis.opendocument.graphics",)),
    ("odp", ("application/vnd.oasis.opendocument.presentation",)),
    ("ods", ("application/vnd.oasis.opendocument.spreadsheet",)),
    ("odt", ("application/vnd.oasis.opendocument.text",)),
    ("oga", ("audio/ogg",)),
    ("ogg", ("audio/ogg",)),
    ("ogv", ("video/ogg",)),
    ("ogx", ("application/ogg",)),
    ("opus", ("audio/ogg", "audio/opus")),
    ("otf", ("font/otf",)),
    ("p", ("application/octet-stream",)),
    ("p10", ("application/pkcs10",)),
    ("p12", ("application/x-pkcs12",)),
    ("p7b", ("application/x-pkcs7-certificates",)),
    ("p7c", ("application/pkcs7-mime",)),
    ("p7m", ("application/pkcs7-mime",)),
    ("p7s", ("application/pkcs7-signature",)),
    ("pages", ("application/x-iwork-pages-sffpages",)),
    ("pbm", ("image/x-portable-bitmap",)),
    ("pdf", ("application/pdf",)),
    ("pem", ("application/x-x509-ca-cert",)),
    ("pfx", ("application/x-pkcs12",)),
    ("pgm", ("image/x-portable-graymap",)),
    ("pgp", ("application/pgp-encrypted",)),
    ("php", ("application/x-httpd-php",)),
    ("pkg", ("application/octet-stream",)),
    ("pl", ("application/x-perl",)),
    ("pm", ("application/x-perl",)),
    ("png", ("image/png",)),
    ("pnm", ("image/x-portable-anymap",)),
    ("pot", ("application/vnd.ms-powerpoint",)),
    ("potx", ("application/vnd.openxmlformats-officedocument.presentationml.template",)),
    ("ppm", ("image/x-portable-pixmap",)),
    ("pps", ("application/vnd.ms-powerpoint",)),
    ("ppsx", ("application/vnd.openxmlformats-officedocument.presentationml.slideshow",)),
    ("ppt", ("application/vnd.ms-powerpoint",)),
    ("pptm", ("application/vnd.ms-powerpoint.presentation.macroenabled.12",)),
    ("pptx", ("application/vnd.openxmlformats-officedocument.presentationml.presentation",)),
    ("prc", ("application/x-mobipocket-ebook",)),
    ("ps", ("application/postscript",)),
    ("psd", ("image/vnd.adobe.photoshop",)),
    ("py", ("text/x-python",)),
    ("pyc", ("application/x-python-code",)),
    ("qt", ("video/quicktime",)),
    ("ra", ("audio/x-pn-realaudio", "audio/x-realaudio")),
    ("ram", ("audio/x-pn-realaudio",)),
    ("rar", ("application/vnd.rar", "application/x-rar-compressed")),
    ("ras", ("image/x-cmu-raster",)),
    ("rb", ("text/x-ruby",)),
    ("rdf", ("application/rdf+xml",)),
    ("rgb", ("image/x-rgb",)),
    ("rm", ("application/vnd.rn-realmedia",)),
    ("roff", ("text/troff",)),
    ("rpm", ("application/x-redhat-package-manager", "application/x-rpm")),
    ("rs", ("text/x-rust",)),
    ("rss", ("application/rss+xml",)),
    ("rtf", ("application/rtf", "text/rtf")),
    ("rtx", ("text/richtext",)),
    ("s", ("text/x-asm",)),
    ("sass", ("text/x-sass",)),
    ("scss", ("text/x-scss",)),
    ("sgm", ("text/sgml",)),
    ("sgml", ("text/sgml",)),
    ("sh", ("application/x-sh",)),
    ("shar", ("application/x-shar",)),
    ("sig", ("application/pgp-signature",)),
    ("sit", ("application/x-stuffit",)),
    ("sitx", ("application/x-stuffitx",)),
    ("snd", ("audio/basic",)),
    ("so", ("application/octet-stream",)),
    ("spx", ("audio/ogg",)),
    ("sql", ("application/sql",)),
    ("src", ("application/x-wais-source",)),
    ("srt", ("application/x-subrip",)),
    ("sv4cpio", ("application/x-sv4cpio",)),
    ("sv4crc", ("application/x-sv4crc",)),
    ("svg", ("image/svg+xml",)),
    ("svgz", ("image/svg+xml",)),
    ("swf", ("application/x-shockwave-flash",)),
    ("t", ("text/troff",)),
    ("tar", ("application/x-tar",)),
    ("tcl", ("application/x-tcl",)),
    ("tex", ("application/x-tex",)),
    ("texi", ("application/x-texinfo",)),
    ("texinfo", ("application/x-texinfo",)),
    ("text", ("text/plain",)),
    ("tga", ("image/x-tga",)),
    ("tgz", ("application/x-tar",)),
    ("tif", ("image/tiff",)),
    ("tiff", ("image/tiff",)),
    ("toml", ("application/toml",)),
    ("torrent", ("application/x-bittorrent",)),
    ("tr", ("text/troff",)),
    ("ts", ("video/mp2t",)),
    ("tsv", ("text/tab-separated-values",)),
    ("ttc", ("font/collection",)),
    ("ttf", ("font/ttf",)),
    ("ttl", ("text/turtle",)),
    ("txt", ("text/plain",)),
    ("udeb", ("application/x-debian-package",)),
    ("uri", ("text/uri-list",)),
    ("uris", ("text/uri-list",)),
    ("urls", ("text/uri-list",)),
    ("ustar", ("application/x-ustar",)),
    ("uu", ("text/x-uuencode",)),
    ("vcard", ("text/vcard",)),
    ("vcd", ("application/x-cdlink",)),
    ("vcf", ("text/x-vcard",)),
    ("vcs", ("text/x-vcalendar",)),
    ("vsd", ("application/vnd.visio",)),
    ("vsdx", ("application/vnd.ms-visio.drawing",)),
    ("vtt", ("text/vtt",)),
    ("wasm", ("application/wasm",)),
    ("wav", ("audio/wav", "audio/wave", "audio/x-wav")),
    ("weba", ("audio/webm",)),
    ("webm", ("video/webm",)),
    ("webmanifest", ("application/manifest+json",)),
    ("webp", ("image/webp",)),
    ("wma", ("audio/x-ms-wma",)),
    ("wmf", ("image/wmf", "application/x-msmetafile")),
    ("wmv", ("video/x-ms-wmv",)),
    ("woff", ("font/woff",)),
    ("woff2", ("font/woff2",)),
    ("wpd", ("application/vnd.wordperfect",)),
    ("wsdl", ("application/wsdl+xml",)),
    ("xbm", ("image/x-xbitmap",)),
    ("xcf", ("image/x-xcf",)),
    ("xht", ("application/xhtml+xml",)),
    ("xhtml", ("application/xhtml+xml",)),
    ("xla", ("application/vnd.ms-excel",)),
    ("xlc", ("application/vnd.ms-excel",)),
    ("xlm", ("application/vnd.ms-excel",)),
    ("xls", ("application/vnd.ms-excel",)),
    ("xlsb", ("application/vnd.ms-excel.sheet.binary.macroenabled.12",)),
    ("xlsm", ("application/vnd.ms-excel.sheet.macroenabled.12",)),
    ("xlsx", ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",)),
    ("xlt", ("application/vnd.ms-excel",)),
    ("xltx", ("application/vnd.openxmlformats-officedocument.spreadsheetml.template",)),
    ("xlw", ("application/vnd.ms-excel",)),
    ("xml", ("text/xml", "application/xml")),
    ("xpi", ("application/x-xpinstall",)),
    ("xpm", ("image/x-xpixmap",)),
    ("xsd", ("application/xml",)),
    ("xsl", ("application/xml", "application/xslt+xml")),
    ("xslt", ("application/xslt+xml",)),
    ("xul", ("application/vnd.mozilla.xul+xml",)),
    ("xwd", ("image/x-xwindowdump",)),
    ("xz", ("application/x-xz",)),
    ("yaml", ("text/yaml", "application/yaml")),
    ("yml", ("text/yaml", "application/yaml")),
    ("z", ("application/x-compress",)),
    ("zip", ("application/zip", "application/x-zip-compressed")),
    ("zst", ("application/zstd",)),
)

# Lookup keys, index-aligned with MIME_TYPES
EXTENSIONS = tuple(ext for ext, _ in MIME_TYPES)
